import datetime as dt
from pydantic import BaseModel, ConfigDict

class ProjectCreate(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    # loose on purpose: rule violations are reported by validate_project
    name: str | None = None
    budget: float | None = None
    status: str | None = None
    province: str | None = None
    city: str | None = None
    latitude: float
    longitude: float


class ProjectUpdate(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str | None = None
    budget: float | None = None
    status: str | None = None
    province: str | None = None

class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    budget: float
    status: str
    province: str
    city: str
    latitude: float
    longitude: float
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None

class ProjectStatsOut(BaseModel):
    total_projects: int
    total_budget: float
    average_budget: float
    province: str
    status: str
