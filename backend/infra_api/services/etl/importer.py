from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from infra_api.core.errors import ClientInputError, db_error_message
from infra_api.core.logging import logger
from infra_api.crud.projects import create_project
from infra_api.services.etl.parsers.json_projects import parse_projects_json
from infra_api.services.etl.parsers.xml_projects import parse_projects_xml
from infra_api.services.etl.records import ProjectRecord
from infra_api.services.etl.validators import validate_project
from infra_api.services.profanity import ProfanityFilter

Parser = Callable[[bytes], list[ProjectRecord]]

PARSERS: dict[str, Parser] = {
    ".json": parse_projects_json,
    ".xml": parse_projects_xml,
}

ALLOWED_CONTENT_TYPES = {
    "application/json",
    "text/json",
    "application/xml",
    "text/xml",
}


@dataclass
class ImportSummary:
    successful: list[dict] = field(default_factory=list)
    failed: list[dict] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.successful) + len(self.failed)

    def to_dict(self) -> dict:
        return {
            "message": "Import completed",
            "total": self.total,
            "successful": len(self.successful),
            "failed": len(self.failed),
            "details": {"successful": self.successful, "failed": self.failed},
        }


def detect_parser(filename: str | None) -> Parser:
    # extension decides; content is never sniffed
    ext = PurePath(filename or "").suffix.lower()
    parser = PARSERS.get(ext)
    if parser is None:
        raise ClientInputError("Unsupported file format. Only .json and .xml files are allowed")
    return parser


def import_records(db: Session, records: list[ProjectRecord], profanity: ProfanityFilter) -> ImportSummary:
    """Validate and insert each record on its own.

    A bad record or a failed insert lands in ``failed`` and the loop moves on;
    rows already inserted stay committed.
    """
    summary = ImportSummary()
    for record in records:
        errors = validate_project(record)
        if errors:
            summary.failed.append({"identifier": record.identifier, "errors": errors})
            logger.info("import_record_invalid", identifier=record.identifier, errors=errors)
            continue

        try:
            p = create_project(db, record, profanity)
        except SQLAlchemyError as e:
            db.rollback()
            msg = db_error_message(e)
            summary.failed.append({"identifier": record.identifier, "errors": [msg]})
            logger.warning("import_record_failed", identifier=record.identifier, error=msg)
            continue

        summary.successful.append({"id": p.id, "name": p.name})
    return summary


def run_import(
    db: Session,
    filename: str | None,
    content: bytes,
    profanity: ProfanityFilter,
    content_type: str | None = None,
) -> ImportSummary:
    parser = detect_parser(filename)
    if content_type and content_type not in ALLOWED_CONTENT_TYPES:
        logger.info("import_unexpected_content_type", filename=filename, content_type=content_type)

    records = parser(content)
    if not records:
        raise ClientInputError("No valid projects found in file")

    logger.info("import_started", filename=filename, records=len(records))
    summary = import_records(db, records, profanity)
    logger.info(
        "import_finished",
        filename=filename,
        total=summary.total,
        successful=len(summary.successful),
        failed=len(summary.failed),
    )
    return summary
