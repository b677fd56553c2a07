import json

from infra_api.core.errors import ParseError
from infra_api.services.etl.records import ProjectRecord, records_from_rows


def _decode(content: bytes) -> str:
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"Invalid JSON file: {e}") from e


def parse_projects_json(content: bytes) -> list[ProjectRecord]:
    """Accepts ``[{...}, ...]`` or ``{"projects": [{...}, ...]}``; any other shape gives no records."""
    try:
        data = json.loads(_decode(content))
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON file: {e}") from e

    if isinstance(data, dict):
        data = data.get("projects")
    if not isinstance(data, list):
        return []

    rows = [item for item in data if isinstance(item, dict)]
    if not rows:
        return []
    return records_from_rows(rows)
