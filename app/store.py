"""Almacén de transacciones en memoria.

Todas las operaciones toman el mismo lock: las peticiones que FastAPI atiende
en paralelo ven la lista antes o después de un cambio, nunca a medias.
"""

import logging
import threading
from datetime import datetime, timedelta
from typing import Iterable, List, Optional
from uuid import uuid4

from app.models.enums import TransactionType
from app.models.transaction import Transaction
from app.schemas.monthly_summary import MonthlySummaryRead
from app.schemas.transaction import TransactionCreate
from app.utils.summary_helpers import summarize_by_month

logger = logging.getLogger(__name__)


class TransactionNotFound(LookupError):
    def __init__(self, transaction_id: str):
        super().__init__(transaction_id)
        self.transaction_id = transaction_id


def seed_transactions(now: Optional[datetime] = None) -> List[Transaction]:
    """Datos de prueba cargados al arrancar."""
    now = now or datetime.now()
    return [
        Transaction(
            id="1",
            amount=1500,
            category="Salary",
            description="Monthly salary",
            date=now - timedelta(days=5),
            type=TransactionType.income.value,
        ),
        Transaction(
            id="2",
            amount=45.99,
            category="Groceries",
            description="Weekly shopping",
            date=now - timedelta(days=3),
            type=TransactionType.expense.value,
        ),
        Transaction(
            id="3",
            amount=25.00,
            category="Entertainment",
            description="Movie tickets",
            date=now - timedelta(days=1),
            type=TransactionType.expense.value,
        ),
    ]


class TransactionStore:
    def __init__(self, transactions: Optional[Iterable[Transaction]] = None):
        self._lock = threading.Lock()
        self._transactions: List[Transaction] = list(transactions or [])

    def list_transactions(self) -> List[Transaction]:
        with self._lock:
            return list(self._transactions)

    def add_transaction(self, data: TransactionCreate) -> Transaction:
        # El id lo asigna el servidor; cualquier id enviado por el cliente se descarta
        transaction = Transaction(id=uuid4().hex, **data.model_dump())
        with self._lock:
            self._transactions.append(transaction)
        logger.info("Added transaction %s (%s %.2f)", transaction.id, transaction.type, transaction.amount)
        return transaction

    def delete_transaction(self, transaction_id: str) -> None:
        with self._lock:
            for i, tx in enumerate(self._transactions):
                if tx.id == transaction_id:
                    del self._transactions[i]
                    break
            else:
                logger.warning("Delete requested for unknown transaction %s", transaction_id)
                raise TransactionNotFound(transaction_id)
        logger.info("Deleted transaction %s", transaction_id)

    def summarize(self) -> List[MonthlySummaryRead]:
        return summarize_by_month(self.list_transactions())

    def seed(self, now: Optional[datetime] = None) -> None:
        seeded = seed_transactions(now)
        with self._lock:
            self._transactions.extend(seeded)
        logger.info("Loaded %d seed transactions", len(seeded))

    def clear(self) -> None:
        with self._lock:
            self._transactions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)


store = TransactionStore()


def get_store() -> TransactionStore:
    return store
