# Path: fraud_screen/mscore/ratio_engine.py
"""
Ratio Engine

Computes the eight Beneish indices from a FinancialData record.

Every index is a quotient of two sub-ratios. Each division goes through
a single helper whose behaviour on a zero or non-finite denominator is
set by DivisionPolicy:

- RAISE:   ScoreComputationError naming the failing term
- NEUTRAL: quotient 1.0, matching the screening application's
           historical safe-division behaviour

Formula variants differ only in GMI, TATA and LVGI. The SIMPLIFIED
variant keeps the historical formulas: GMI on the cost ratio
(sales - GP) / sales, TATA from operating income less operating cash
flow, and LVGI with current assets where the published model has
current liabilities. SIMPLIFIED reproduces previously stored scores
exactly; CANONICAL gives the published model.

No logging here: these functions are pure.
"""

import math

from constants import DivisionPolicy, FormulaVariant

from .errors import ScoreComputationError
from .financial_data import FinancialData, PeriodFigures
from .model_parameters import BENEISH_MODEL, ModelParameters
from .score_models import MScoreComponents, RatioDetail


class _Divider:
    """Division helper bound to one DivisionPolicy."""

    def __init__(self, policy: DivisionPolicy):
        self.policy = DivisionPolicy(policy)

    def __call__(self, term: str, numerator: float, denominator: float) -> float:
        if self.policy == DivisionPolicy.NEUTRAL:
            if denominator == 0 or math.isnan(denominator) or math.isnan(numerator):
                return 1.0
            result = numerator / denominator
            return result if math.isfinite(result) else 1.0

        if (
            denominator == 0
            or not math.isfinite(denominator)
            or not math.isfinite(numerator)
        ):
            raise ScoreComputationError(term, numerator, denominator)
        result = numerator / denominator
        if not math.isfinite(result):
            raise ScoreComputationError(term, numerator, denominator)
        return result


def _detail(
    name: str,
    numerator: float,
    denominator: float,
    value: float,
    variant: FormulaVariant,
    params: ModelParameters,
) -> RatioDetail:
    return RatioDetail(
        name=name,
        numerator=numerator,
        denominator=denominator,
        value=value,
        formula=params.component(name).formula_for(variant),
    )


def _tata_numerator(
    cur: PeriodFigures,
    pri: PeriodFigures,
    data: FinancialData,
    variant: FormulaVariant,
) -> float:
    """Total accruals for the chosen variant."""
    if variant == FormulaVariant.CANONICAL:
        delta_ca = cur.current_assets - pri.current_assets
        delta_cash = cur.cash - pri.cash
        delta_cl = cur.current_liabilities - pri.current_liabilities
        delta_tax = cur.tax_payable - pri.tax_payable
        return delta_ca - delta_cash - (delta_cl - delta_tax) - cur.depreciation
    return data.operating_income_current - data.operating_cash_flow_current


def compute_components(
    data: FinancialData,
    variant: FormulaVariant = FormulaVariant.SIMPLIFIED,
    division: DivisionPolicy = DivisionPolicy.RAISE,
    params: ModelParameters = BENEISH_MODEL,
) -> tuple[MScoreComponents, tuple[RatioDetail, ...]]:
    """
    Compute the eight indices and their sub-ratio breakdown.

    Args:
        data: Two-period financial data
        variant: Formula variant for GMI, TATA and LVGI
        division: Zero / non-finite denominator policy
        params: Model parameters (formula text only)

    Returns:
        (MScoreComponents, details in model order)

    Raises:
        ScoreComputationError: Under DivisionPolicy.RAISE when a
            denominator is zero or a value is non-finite
    """
    variant = FormulaVariant(variant)
    div = _Divider(division)
    cur = data.current
    pri = data.prior

    # DSRI
    rec_cur = div('dsri.current', cur.receivables, cur.sales)
    rec_pri = div('dsri.prior', pri.receivables, pri.sales)
    dsri = div('dsri', rec_cur, rec_pri)

    # GMI, prior over current
    if variant == FormulaVariant.CANONICAL:
        margin_pri = div('gmi.prior', pri.gross_profit, pri.sales)
        margin_cur = div('gmi.current', cur.gross_profit, cur.sales)
    else:
        margin_pri = div('gmi.prior', pri.sales - pri.gross_profit, pri.sales)
        margin_cur = div('gmi.current', cur.sales - cur.gross_profit, cur.sales)
    gmi = div('gmi', margin_pri, margin_cur)

    # AQI
    soft_cur = 1 - div('aqi.current', cur.current_assets + cur.ppe, cur.total_assets)
    soft_pri = 1 - div('aqi.prior', pri.current_assets + pri.ppe, pri.total_assets)
    aqi = div('aqi', soft_cur, soft_pri)

    # SGI
    sgi = div('sgi', cur.sales, pri.sales)

    # DEPI, prior over current
    dep_pri = div('depi.prior', pri.depreciation, pri.ppe + pri.depreciation)
    dep_cur = div('depi.current', cur.depreciation, cur.ppe + cur.depreciation)
    depi = div('depi', dep_pri, dep_cur)

    # SGAI
    sga_cur = div('sgai.current', cur.sga, cur.sales)
    sga_pri = div('sgai.prior', pri.sga, pri.sales)
    sgai = div('sgai', sga_cur, sga_pri)

    # TATA
    accruals = _tata_numerator(cur, pri, data, variant)
    tata = div('tata', accruals, cur.total_assets)

    # LVGI
    if variant == FormulaVariant.CANONICAL:
        lev_cur = div('lvgi.current', cur.long_term_debt + cur.current_liabilities, cur.total_assets)
        lev_pri = div('lvgi.prior', pri.long_term_debt + pri.current_liabilities, pri.total_assets)
    else:
        lev_cur = div('lvgi.current', cur.long_term_debt + cur.current_assets, cur.total_assets)
        lev_pri = div('lvgi.prior', pri.long_term_debt + pri.current_assets, pri.total_assets)
    lvgi = div('lvgi', lev_cur, lev_pri)

    components = MScoreComponents(
        dsri=dsri, gmi=gmi, aqi=aqi, sgi=sgi,
        depi=depi, sgai=sgai, tata=tata, lvgi=lvgi,
    )

    details = (
        _detail('dsri', rec_cur, rec_pri, dsri, variant, params),
        _detail('gmi', margin_pri, margin_cur, gmi, variant, params),
        _detail('aqi', soft_cur, soft_pri, aqi, variant, params),
        _detail('sgi', cur.sales, pri.sales, sgi, variant, params),
        _detail('depi', dep_pri, dep_cur, depi, variant, params),
        _detail('sgai', sga_cur, sga_pri, sgai, variant, params),
        _detail('tata', accruals, cur.total_assets, tata, variant, params),
        _detail('lvgi', lev_cur, lev_pri, lvgi, variant, params),
    )

    return components, details


__all__ = ['compute_components']
