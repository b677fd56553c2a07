from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from infra_api.core.errors import ConflictError, NotFoundError, is_unique_violation
from infra_api.core.logging import logger
from infra_api.crud.companies import company_exists
from infra_api.crud.projects import project_exists
from infra_api.db.models.assignment import Assignment
from infra_api.db.models.company import Company
from infra_api.db.models.project import Project

ALREADY_ASSIGNED = "This company is already assigned to this project"


def create_assignment(db: Session, project_id: int, company_id: int) -> Assignment:
    """Link a company to a project.

    The existence checks only give a clearer 404; two requests for the same pair
    can both pass them, and the unique constraint decides which one wins.
    """
    if not project_exists(db, project_id):
        raise NotFoundError("Project not found")
    if not company_exists(db, company_id):
        raise NotFoundError("Company not found")

    a = Assignment(project_id=project_id, company_id=company_id)
    db.add(a)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            logger.info("assignment_conflict", project_id=project_id, company_id=company_id)
            raise ConflictError(ALREADY_ASSIGNED) from e
        raise
    db.refresh(a)
    logger.info("assignment_created", assignment_id=a.id, project_id=project_id, company_id=company_id)
    return a


def delete_assignment(db: Session, assignment_id: int) -> None:
    n = db.query(Assignment).filter(Assignment.id == assignment_id).delete(synchronize_session=False)
    db.commit()
    if n == 0:
        raise NotFoundError("Assignment not found")


def list_assignments(db: Session, project_id: int | None = None) -> list[dict]:
    q = (
        db.query(
            Assignment.id,
            Assignment.project_id,
            Assignment.company_id,
            Assignment.created_at,
            Project.name.label("project_name"),
            Project.status.label("project_status"),
            Project.province.label("project_province"),
            Project.city.label("project_city"),
            Company.name.label("company_name"),
        )
        .join(Project, Assignment.project_id == Project.id)
        .join(Company, Assignment.company_id == Company.id)
    )
    if project_id is not None:
        q = q.filter(Assignment.project_id == project_id)
    rows = q.order_by(Assignment.created_at.desc(), Assignment.id.desc()).all()
    return [dict(r._mapping) for r in rows]
