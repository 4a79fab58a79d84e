"""
Collection Statistics

Summarizes many analysis results into the headline numbers shown on a
dashboard: how many bills were analyzed, how many carry pork, and how much
money the flagged items add up to.
"""

from __future__ import annotations

from typing import Iterable

from porkscan.extractor import format_amount
from porkscan.models import AnalysisResult


def summarize(results: Iterable[AnalysisResult]) -> dict:
    """
    Aggregate a batch of results.

    Returns:
        dict with total_bills, bills_with_pork, pork_percentage (two
        decimals, 0.0 for an empty batch), total_pork_value and its
        display form.
    """
    total_bills = 0
    bills_with_pork = 0
    total_value = 0.0

    for result in results:
        total_bills += 1
        if result.has_pork:
            bills_with_pork += 1
            total_value += result.total_pork_value

    percentage = round(bills_with_pork / total_bills * 100, 2) if total_bills else 0.0

    return {
        "total_bills": total_bills,
        "bills_with_pork": bills_with_pork,
        "pork_percentage": percentage,
        "total_pork_value": total_value,
        "total_pork_value_display": format_amount(total_value),
    }
