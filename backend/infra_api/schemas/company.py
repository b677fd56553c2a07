from pydantic import BaseModel, ConfigDict, Field

class CompanyCreate(BaseModel):
    name: str = Field(..., min_length=1)
    province: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    email: str | None = None
    number: str | None = None

class CompanyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    province: str
    city: str
    email: str | None = None
    number: str | None = None
