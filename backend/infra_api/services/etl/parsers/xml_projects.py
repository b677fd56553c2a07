from xml.etree import ElementTree

from infra_api.core.errors import ParseError
from infra_api.services.etl.records import ProjectRecord, records_from_rows


def _row(project: ElementTree.Element) -> dict:
    row = {}
    for child in project:
        # empty elements count as absent
        text = (child.text or "").strip()
        row[child.tag] = text or None
    return row


def parse_projects_xml(content: bytes) -> list[ProjectRecord]:
    """Reads ``<projects><project>...</project>...</projects>``.

    Each ``<project>`` child becomes one record, so a file with a single project
    still yields a one-element list. Element text is kept verbatim (``NA`` is a name,
    not a missing value).
    """
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        raise ParseError(f"Invalid XML file: {e}") from e

    if root.tag != "projects":
        return []
    rows = [_row(p) for p in root.findall("project")]
    if not rows:
        return []
    return records_from_rows(rows)
