#!/usr/bin/env python3
# Path: fraud_screen/main.py
"""
fraud_screen - Main Entry Point

Beneish M-Score screening for two-period financial statements.

Data Flow:
    INPUT:   JSON payload (extracted and/or manually entered line items)
    PROCESS: validation, M-Score computation, red flags
    OUTPUT:  report on stdout and/or text / JSON / CSV files

Usage:
    python main.py data.json                       # Print report
    python main.py extracted.json --manual fix.json
    python main.py data.json --variant canonical
    python main.py data.json --format json --output-dir reports/
    python main.py data.json --validate-only

Exit codes:
    0  success
    1  configuration or file error
    2  invalid financial data
    3  score computation error
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Ensure fraud_screen root is in path
sys.path.insert(0, str(Path(__file__).parent))

from config_loader import ConfigLoader
from core.logger import setup_ipo_logging, get_input_logger
from loaders import FinancialDataLoader, ParsedPayload
from mscore import (
    InvalidFinancialDataError,
    ScoreComputationError,
    MScoreScreener,
    validate_financial_data,
)
from output import ReportGenerator
from constants import (
    ConfidenceLevel,
    DivisionPolicy,
    FormulaVariant,
    OutputFormat,
    STATUS_OK, STATUS_FAIL, STATUS_WARN, STATUS_INFO,
    MENU_HEADER,
)


EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_DATA = 2
EXIT_COMPUTATION = 3


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  FRAUD_SCREEN - Beneish M-Score Screening")
    print("  Earnings Manipulation Risk from Two-Period Statements")
    print(MENU_HEADER)
    print()


def build_parser() -> argparse.ArgumentParser:
    """Command line parser."""
    parser = argparse.ArgumentParser(
        description='fraud_screen - Beneish M-Score screening',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py data.json                         Print text report
  python main.py extracted.json --manual fix.json  Apply manual corrections
  python main.py data.json --variant canonical     Published Beneish formulas
  python main.py data.json -f json -f csv -o out/  Write JSON and CSV files
        """
    )

    parser.add_argument(
        'input',
        type=Path,
        help='JSON payload with financial data (flat or extraction envelope)'
    )

    parser.add_argument(
        '--manual', '-m',
        type=Path,
        help='JSON file with manually entered values; these override the input'
    )

    parser.add_argument(
        '--variant',
        choices=[v.value for v in FormulaVariant],
        help='Formula variant (default from FRAUD_SCREEN_FORMULA_VARIANT)'
    )

    parser.add_argument(
        '--division',
        choices=[d.value for d in DivisionPolicy],
        help='Zero-denominator policy (default from FRAUD_SCREEN_DIVISION_POLICY)'
    )

    parser.add_argument(
        '--format', '-f',
        dest='formats',
        action='append',
        choices=[f.value for f in OutputFormat],
        help='Output format; repeat for several (default text on stdout)'
    )

    parser.add_argument(
        '--output-dir', '-o',
        type=Path,
        help='Write report files here (default FRAUD_SCREEN_REPORTS_DIR)'
    )

    parser.add_argument(
        '--validate-only',
        action='store_true',
        help='Validate the input and stop without scoring'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner and status output'
    )

    return parser


def load_payload(
    loader: FinancialDataLoader,
    input_path: Path,
    manual_path: Optional[Path],
) -> ParsedPayload:
    """
    Load the input payload and apply manual overrides.

    Raises:
        FileNotFoundError: If a file does not exist
        ValueError: If a file is not a valid payload
    """
    parsed = loader.load_file(input_path)
    if manual_path is not None:
        manual = loader.load_file(manual_path, method='manual')
        parsed = loader.merge_payloads(parsed, manual)
    return parsed


def print_confidence(loader: FinancialDataLoader, parsed: ParsedPayload) -> None:
    """List required fields whose extraction confidence is low or absent."""
    weak = []
    for name in loader.catalog.required_fields():
        level = loader.get_confidence_level(parsed.confidence.get(name, 0.0))
        if level in (ConfidenceLevel.LOW, ConfidenceLevel.NONE):
            weak.append(f"{name} ({level.value})")

    print(
        f"{STATUS_INFO} Method: {parsed.method}, "
        f"completeness {loader.completeness(parsed.values)}%, "
        f"confidence {parsed.overall_confidence:.0f}"
    )
    if weak:
        print(f"{STATUS_WARN} Low confidence: {', '.join(weak)}")


def print_field_errors(error: InvalidFinancialDataError) -> None:
    """Print field-level validation errors."""
    print(f"\n{STATUS_FAIL} Invalid financial data:")
    for name, problem in sorted(error.field_errors.items()):
        print(f"  - {name}: {problem}")


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for fraud_screen.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    args = build_parser().parse_args(argv)

    if not args.quiet:
        print_banner()

    try:
        config = ConfigLoader()
        setup_ipo_logging(
            log_dir=config.get('log_dir'),
            log_level=config.get('log_level', 'INFO'),
            console_output=config.get('log_console', True) and not args.quiet,
        )
        logger = get_input_logger('main')
        logger.info(f"Screening input: {args.input}")

        loader = FinancialDataLoader(config=config)
        parsed = load_payload(loader, args.input, args.manual)
        if not args.quiet:
            print_confidence(loader, parsed)

        data = loader.build_financial_data(parsed.values)
        variant = FormulaVariant(args.variant or config.get('formula_variant'))

        if args.validate_only:
            report = validate_financial_data(data, variant)
            for warning in report.warnings:
                print(f"{STATUS_WARN} {warning}")
            if not report.is_valid:
                print_field_errors(InvalidFinancialDataError(report.errors))
                return EXIT_INVALID_DATA
            print(f"{STATUS_OK} Valid (completeness {report.completeness}%)")
            return EXIT_OK

        screener = MScoreScreener(config, variant=variant, division=args.division)
        outcome = screener.screen(data)

        generator = ReportGenerator(config)
        report = generator.generate(outcome)

        output_dir = args.output_dir or config.get('reports_dir')
        if output_dir is not None:
            written = generator.write(report, output_dir, args.formats)
            if not args.quiet:
                for fmt_name, path in written.items():
                    print(f"{STATUS_OK} Wrote {fmt_name}: {path}")
        else:
            formats = args.formats or [OutputFormat.TEXT.value]
            print(generator.render(report, formats[0]))

        return EXIT_OK

    except InvalidFinancialDataError as e:
        print_field_errors(e)
        return EXIT_INVALID_DATA

    except ScoreComputationError as e:
        print(f"\n{STATUS_FAIL} Score computation failed: {e}")
        return EXIT_COMPUTATION

    except (ValueError, OSError) as e:
        print(f"\n{STATUS_FAIL} Error: {e}")
        return EXIT_ERROR

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130


if __name__ == '__main__':
    sys.exit(main())
