from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class MonthlySummaryRead(BaseModel):
    month: str
    year: int
    total_income: float
    total_expenses: float
    net_amount: float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
