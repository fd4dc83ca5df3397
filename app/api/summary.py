from fastapi import APIRouter, Depends
from typing import List

from app.schemas.monthly_summary import MonthlySummaryRead
from app.store import TransactionStore, get_store

router = APIRouter(prefix="/api/summary", tags=["summary"])


@router.get("", response_model=List[MonthlySummaryRead])
@router.get("/", response_model=List[MonthlySummaryRead], include_in_schema=False)
def get_monthly_summary(store: TransactionStore = Depends(get_store)):
    # Se calcula en cada petición, no se guarda
    return store.summarize()
