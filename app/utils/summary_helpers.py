import calendar
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from app.models.enums import TransactionType
from app.models.transaction import Transaction
from app.schemas.monthly_summary import MonthlySummaryRead


def summarize_by_month(transactions: Iterable[Transaction]) -> List[MonthlySummaryRead]:
    """Agrupa las transacciones por (año, mes) y totaliza ingresos y gastos.

    Los tipos distintos de income/expense crean el grupo pero no suman a
    ningún total. El resultado sale ordenado cronológicamente.
    """
    totals: Dict[Tuple[int, int], Dict[str, float]] = defaultdict(
        lambda: {"income": 0.0, "expense": 0.0}
    )

    for tx in transactions:
        group = totals[(tx.date.year, tx.date.month)]
        if tx.type == TransactionType.income:
            group["income"] += tx.amount
        elif tx.type == TransactionType.expense:
            group["expense"] += tx.amount

    return [
        MonthlySummaryRead(
            month=calendar.month_name[month],
            year=year,
            total_income=v["income"],
            total_expenses=v["expense"],
            net_amount=v["income"] - v["expense"],
        )
        for (year, month), v in sorted(totals.items())
    ]
