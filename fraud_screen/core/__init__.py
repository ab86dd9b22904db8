# Path: fraud_screen/core/__init__.py
"""
fraud_screen Core Package

Core utilities for the M-Score screening system.

Submodules:
    - logger: IPO-aware logging system
"""
