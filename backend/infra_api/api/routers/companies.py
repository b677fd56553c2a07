from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from infra_api.core.deps import get_db
from infra_api.crud.companies import create_company, delete_company, list_companies
from infra_api.schemas.common import MessageOut
from infra_api.schemas.company import CompanyCreate, CompanyOut

router = APIRouter()

@router.get("", response_model=list[CompanyOut])
def get_companies(db: Session = Depends(get_db)):
    return list_companies(db)

@router.post("", response_model=CompanyOut, status_code=201)
def post_company(data: CompanyCreate, db: Session = Depends(get_db)):
    return create_company(db, data)

@router.delete("/{company_id}", response_model=MessageOut)
def remove_company(company_id: int, db: Session = Depends(get_db)):
    if not delete_company(db, company_id):
        raise HTTPException(status_code=404, detail="Company not found")
    return {"message": "Company deleted successfully"}
