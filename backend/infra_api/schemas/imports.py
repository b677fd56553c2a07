from pydantic import BaseModel

class ImportedProjectOut(BaseModel):
    id: int
    name: str

class ImportFailureOut(BaseModel):
    identifier: str
    errors: list[str]

class ImportDetailsOut(BaseModel):
    successful: list[ImportedProjectOut]
    failed: list[ImportFailureOut]

class ImportSummaryOut(BaseModel):
    message: str
    total: int
    successful: int
    failed: int
    details: ImportDetailsOut
