from sqlalchemy.orm import Session
from infra_api.db.models.company import Company
from infra_api.schemas.company import CompanyCreate

def list_companies(db: Session):
    return db.query(Company).order_by(Company.id).all()

def company_exists(db: Session, company_id: int) -> bool:
    return db.query(Company.id).filter(Company.id == company_id).first() is not None

def create_company(db: Session, data: CompanyCreate) -> Company:
    c = Company(
        name=data.name,
        province=data.province,
        city=data.city,
        email=data.email,
        number=data.number,
    )
    db.add(c)
    db.commit()
    db.refresh(c)
    return c

def delete_company(db: Session, company_id: int) -> int:
    n = db.query(Company).filter(Company.id == company_id).delete(synchronize_session=False)
    db.commit()
    return n
