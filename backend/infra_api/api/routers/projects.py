from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from infra_api.core.deps import get_db, get_profanity_filter
from infra_api.core.errors import ClientInputError
from infra_api.crud.assignments import list_assignments
from infra_api.crud.projects import create_project, delete_project, get_project, list_projects, update_project
from infra_api.schemas.assignment import AssignmentOut
from infra_api.schemas.common import MessageOut
from infra_api.schemas.project import ProjectCreate, ProjectOut, ProjectUpdate
from infra_api.services.etl.records import ProjectRecord
from infra_api.services.etl.validators import (
    validate_budget,
    validate_name,
    validate_project,
    validate_province,
    validate_status,
)
from infra_api.services.profanity import ProfanityFilter

router = APIRouter()


def _get_or_404(db: Session, project_id: int):
    p = get_project(db, project_id)
    if not p:
        raise HTTPException(status_code=404, detail="Project not found")
    return p


@router.get("", response_model=list[ProjectOut])
def get_projects(db: Session = Depends(get_db)):
    return list_projects(db)

@router.post("", response_model=ProjectOut, status_code=201)
def post_project(
    data: ProjectCreate,
    db: Session = Depends(get_db),
    profanity: ProfanityFilter = Depends(get_profanity_filter),
):
    record = ProjectRecord(**data.model_dump())
    errors = validate_project(record)
    if errors:
        raise ClientInputError("; ".join(errors))
    return create_project(db, record, profanity)


@router.get("/{project_id}", response_model=ProjectOut)
def get_one_project(project_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, project_id)


@router.put("/{project_id}", response_model=ProjectOut)
def put_project(
    project_id: int,
    data: ProjectUpdate,
    db: Session = Depends(get_db),
    profanity: ProfanityFilter = Depends(get_profanity_filter),
):
    p = _get_or_404(db, project_id)
    checks = []
    if data.name is not None:
        checks.append(validate_name(data.name))
    if data.budget is not None:
        checks.append(validate_budget(data.budget))
    if data.status is not None:
        checks.append(validate_status(data.status))
    if data.province is not None:
        checks.append(validate_province(data.province))
    errors = [c for c in checks if c]
    if errors:
        raise ClientInputError("; ".join(errors))
    return update_project(db, p, data, profanity)


@router.delete("/{project_id}", response_model=MessageOut)
def remove_project(project_id: int, db: Session = Depends(get_db)):
    if not delete_project(db, project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return {"message": "Project deleted successfully"}


@router.get("/{project_id}/assignments", response_model=list[AssignmentOut])
def get_project_assignments(project_id: int, db: Session = Depends(get_db)):
    _get_or_404(db, project_id)
    return list_assignments(db, project_id=project_id)
