from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from infra_api.core.config import settings
from infra_api.core.deps import get_db, get_profanity_filter
from infra_api.core.errors import ClientInputError
from infra_api.schemas.imports import ImportSummaryOut
from infra_api.services.etl.importer import detect_parser, run_import
from infra_api.services.files import read_upload
from infra_api.services.profanity import ProfanityFilter

router = APIRouter()


@router.post("/import", response_model=ImportSummaryOut)
def import_projects(
    file: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    profanity: ProfanityFilter = Depends(get_profanity_filter),
):
    if file is None or not file.filename:
        raise ClientInputError("No file uploaded")
    # reject unsupported types before reading the body
    detect_parser(file.filename)
    content = read_upload(file, settings.MAX_UPLOAD_BYTES)
    summary = run_import(db, file.filename, content, profanity, content_type=file.content_type)
    return summary.to_dict()
