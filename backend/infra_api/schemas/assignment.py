import datetime as dt
from pydantic import BaseModel

class AssignmentCreate(BaseModel):
    project_id: int
    company_id: int

class AssignmentCreatedOut(BaseModel):
    id: int
    project_id: int
    company_id: int
    message: str = "Assignment created successfully"

class AssignmentOut(BaseModel):
    id: int
    project_id: int
    company_id: int
    created_at: dt.datetime | None
    project_name: str
    project_status: str
    project_province: str
    project_city: str
    company_name: str
