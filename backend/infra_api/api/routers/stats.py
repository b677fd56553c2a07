from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from infra_api.core.deps import get_db
from infra_api.crud.projects import project_stats
from infra_api.schemas.project import ProjectStatsOut

router = APIRouter()

@router.get("", response_model=list[ProjectStatsOut])
def get_stats(db: Session = Depends(get_db)):
    return project_stats(db)
