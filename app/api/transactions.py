from fastapi import APIRouter, Depends, HTTPException
from typing import List

from app.schemas.transaction import TransactionCreate, TransactionDeleted, TransactionRead
from app.store import TransactionNotFound, TransactionStore, get_store

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionRead])
@router.get("/", response_model=List[TransactionRead], include_in_schema=False)
def list_transactions(store: TransactionStore = Depends(get_store)):
    return store.list_transactions()


@router.post("", response_model=TransactionRead, status_code=201)
@router.post("/", response_model=TransactionRead, status_code=201, include_in_schema=False)
def create_transaction(
    transaction_data: TransactionCreate,
    store: TransactionStore = Depends(get_store),
):
    return store.add_transaction(transaction_data)


@router.delete("/{transaction_id}", response_model=TransactionDeleted)
def delete_transaction(
    transaction_id: str,
    store: TransactionStore = Depends(get_store),
):
    try:
        store.delete_transaction(transaction_id)
    except TransactionNotFound:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return TransactionDeleted()
