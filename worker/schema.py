from pydantic import BaseModel, ConfigDict


class WorkerSchema(BaseModel):
    id: int
    name: str
    code: str
    model_config = ConfigDict(from_attributes=True)


# INTERNAL DTO used by the seed path
class WorkerCreate(BaseModel):
    name: str
    code: str
