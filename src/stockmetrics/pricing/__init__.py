"""Pricing formulas."""

from stockmetrics.pricing.formulas import dividend_yield, pe_ratio

__all__ = ["dividend_yield", "pe_ratio"]
