from pydantic import BaseModel, Field
from datetime import datetime

class Transaction(BaseModel):
    id: str
    amount: float = Field(ge=0, allow_inf_nan=False)
    category: str
    description: str = ""
    date: datetime
    # "income" o "expense"; cualquier otro valor se guarda pero no suma en el resumen
    type: str
