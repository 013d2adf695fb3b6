"""
Indicator App - Stock Indicator Calculation Engine

A pluggable set of technical, fundamental and chip (ownership/leverage)
indicator calculators plus the engine that runs them against a snapshot of
market data and produces comparable, scored signals.
"""

__version__ = "0.1.0"
__author__ = "Indicator App Team"
