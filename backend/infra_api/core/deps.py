from fastapi import Request

from infra_api.db.session import SessionLocal
from infra_api.services.profanity import ProfanityFilter

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_profanity_filter(request: Request) -> ProfanityFilter:
    return request.app.state.profanity_filter
