"""Tests for the monthly aggregation."""

import random
from datetime import datetime

import pytest

from app.models.transaction import Transaction
from app.store import seed_transactions
from app.utils.summary_helpers import summarize_by_month


def make_tx(id: str, amount: float, date: datetime, type: str) -> Transaction:
    return Transaction(id=id, amount=amount, category="Misc", description="", date=date, type=type)


class TestSummarizeByMonth:
    """Tests for summarize_by_month."""

    def test_empty_input_yields_empty_result(self) -> None:
        assert summarize_by_month([]) == []

    def test_seed_data_in_one_month(self) -> None:
        """Seed records dated in the same month collapse to one summary."""
        result = summarize_by_month(seed_transactions(datetime(2024, 3, 20, 12, 0)))

        assert len(result) == 1
        summary = result[0]
        assert summary.month == "March"
        assert summary.year == 2024
        assert summary.total_income == pytest.approx(1500)
        assert summary.total_expenses == pytest.approx(70.99)
        assert summary.net_amount == pytest.approx(1429.01)

    def test_groups_by_month_and_year(self) -> None:
        """Same month in different years must not share a group."""
        txs = [
            make_tx("a", 10, datetime(2023, 1, 5), "income"),
            make_tx("b", 20, datetime(2024, 1, 5), "income"),
            make_tx("c", 5, datetime(2024, 1, 31), "expense"),
            make_tx("d", 7, datetime(2024, 2, 1), "expense"),
        ]

        result = {(s.month, s.year): s for s in summarize_by_month(txs)}

        assert set(result) == {("January", 2023), ("January", 2024), ("February", 2024)}
        assert result[("January", 2023)].total_income == 10
        assert result[("January", 2024)].net_amount == 15
        assert result[("February", 2024)].net_amount == -7

    def test_unknown_type_counts_toward_neither_total(self) -> None:
        """A transfer still creates its month group but adds nothing."""
        txs = [make_tx("a", 99, datetime(2024, 6, 1), "transfer")]

        result = summarize_by_month(txs)

        assert len(result) == 1
        assert result[0].month == "June"
        assert result[0].total_income == 0
        assert result[0].total_expenses == 0
        assert result[0].net_amount == 0

    def test_net_is_income_minus_expenses(self) -> None:
        txs = [
            make_tx(str(i), float(i), datetime(2024, 1 + i % 3, 10), "income" if i % 2 else "expense")
            for i in range(1, 20)
        ]

        for summary in summarize_by_month(txs):
            assert summary.net_amount == summary.total_income - summary.total_expenses

    def test_order_independent(self) -> None:
        """Permuting the input yields the same set of summaries."""
        txs = [
            make_tx(str(i), float(i), datetime(2020 + i % 2, 1 + i % 12, 1), "income" if i % 3 else "expense")
            for i in range(30)
        ]
        shuffled = list(txs)
        random.Random(7).shuffle(shuffled)

        def as_set(summaries):
            return {
                (s.month, s.year, round(s.total_income, 6), round(s.total_expenses, 6))
                for s in summaries
            }

        assert as_set(summarize_by_month(txs)) == as_set(summarize_by_month(shuffled))
