from pydantic import BaseModel, ConfigDict


class MonthlySummaryRow(BaseModel):
    worker_id: int
    name: str
    code: str
    total_shifts: int = 0
    s1_count: int = 0
    s2_count: int = 0
    s3_count: int = 0
    s4_count: int = 0
    s5_count: int = 0
    total_amount: int = 0
    model_config = ConfigDict(from_attributes=True)
