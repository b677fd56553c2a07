from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from infra_api.core.deps import get_db
from infra_api.crud.assignments import create_assignment, delete_assignment, list_assignments
from infra_api.schemas.assignment import AssignmentCreate, AssignmentCreatedOut, AssignmentOut
from infra_api.schemas.common import MessageOut

router = APIRouter()

@router.get("", response_model=list[AssignmentOut])
def get_assignments(db: Session = Depends(get_db)):
    return list_assignments(db)

@router.post("", response_model=AssignmentCreatedOut, status_code=201)
def post_assignment(data: AssignmentCreate, db: Session = Depends(get_db)):
    a = create_assignment(db, data.project_id, data.company_id)
    return AssignmentCreatedOut(id=a.id, project_id=a.project_id, company_id=a.company_id)

@router.delete("/{assignment_id}", response_model=MessageOut)
def remove_assignment(assignment_id: int, db: Session = Depends(get_db)):
    delete_assignment(db, assignment_id)
    return {"message": "Assignment deleted successfully"}
