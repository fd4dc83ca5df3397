from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from datetime import datetime
from typing import Annotated


def _reject_numeric_date(value):
    # pydantic acepta enteros como timestamps unix; aquí solo vale ISO-8601
    if isinstance(value, (int, float)):
        raise ValueError("date must be an ISO-8601 string")
    return value


class TransactionCreate(BaseModel):
    # strict: un entero JSON sigue valiendo, pero no strings ni booleanos
    amount: float = Field(ge=0, strict=True, allow_inf_nan=False)
    category: str
    description: str = ""
    date: Annotated[datetime, BeforeValidator(_reject_numeric_date)]
    type: str

class TransactionRead(TransactionCreate):
    id: str

    model_config = ConfigDict(from_attributes=True)

class TransactionDeleted(BaseModel):
    message: str = "Transaction deleted"
