import math
from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.orm import Session

from infra_api.db.models.project import Project
from infra_api.schemas.project import ProjectUpdate
from infra_api.services.etl.records import ProjectRecord
from infra_api.services.profanity import ProfanityFilter

def _dec(v) -> Decimal | None:
    # NaN/inf become NULL so the NOT NULL columns reject the row
    if v is None or not math.isfinite(float(v)):
        return None
    return Decimal(str(v))

def list_projects(db: Session):
    return db.query(Project).order_by(Project.id).all()

def get_project(db: Session, project_id: int) -> Project | None:
    return db.query(Project).filter(Project.id == project_id).one_or_none()

def project_exists(db: Session, project_id: int) -> bool:
    return db.query(Project.id).filter(Project.id == project_id).first() is not None

def create_project(db: Session, record: ProjectRecord, profanity: ProfanityFilter) -> Project:
    p = Project(
        name=profanity.clean(record.name.strip()),
        budget=_dec(record.budget),
        status=record.status,
        province=record.province,
        city=record.city.strip(),
        latitude=_dec(record.latitude),
        longitude=_dec(record.longitude),
    )
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def update_project(db: Session, p: Project, data: ProjectUpdate, profanity: ProfanityFilter) -> Project:
    if data.name is not None:
        p.name = profanity.clean(data.name.strip())
    if data.budget is not None:
        p.budget = _dec(data.budget)
    if data.status is not None:
        p.status = data.status
    if data.province is not None:
        p.province = data.province
    db.commit()
    db.refresh(p)
    return p


def delete_project(db: Session, project_id: int) -> int:
    # assignments go with it (ON DELETE CASCADE)
    n = db.query(Project).filter(Project.id == project_id).delete(synchronize_session=False)
    db.commit()
    return n


def project_stats(db: Session) -> list[dict]:
    rows = (
        db.query(
            func.count(Project.id).label("total_projects"),
            func.sum(Project.budget).label("total_budget"),
            func.avg(Project.budget).label("average_budget"),
            Project.province,
            Project.status,
        )
        .group_by(Project.province, Project.status)
        .order_by(Project.province, Project.status)
        .all()
    )
    return [
        {
            "total_projects": r.total_projects,
            "total_budget": float(r.total_budget or 0),
            "average_budget": float(r.average_budget or 0),
            "province": r.province,
            "status": r.status,
        }
        for r in rows
    ]
