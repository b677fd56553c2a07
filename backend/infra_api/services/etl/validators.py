from typing import Any

from infra_api.services.etl.records import ProjectRecord

STATUSES = ("planning", "in-progress", "completed", "on-hold")

PROVINCES = (
    "Alberta",
    "British Columbia",
    "Manitoba",
    "New Brunswick",
    "Newfoundland and Labrador",
    "Nova Scotia",
    "Ontario",
    "Prince Edward Island",
    "Quebec",
    "Saskatchewan",
)

NAME_REQUIRED = "Name is required"
BUDGET_INVALID = "Budget must be a positive number"
STATUS_INVALID = f"Status must be one of: {', '.join(STATUSES)}"
PROVINCE_INVALID = f"Province must be one of: {', '.join(PROVINCES)}"
CITY_REQUIRED = "City is required"


def is_blank(v: Any) -> bool:
    return not isinstance(v, str) or not v.strip()


def is_positive_number(v: Any) -> bool:
    if v is None or isinstance(v, bool):
        return False
    try:
        f = float(v)
    except (TypeError, ValueError):
        return False
    # NaN compares False
    return f > 0 and f != float("inf")


def validate_name(v: Any) -> str | None:
    return NAME_REQUIRED if is_blank(v) else None


def validate_budget(v: Any) -> str | None:
    return None if is_positive_number(v) else BUDGET_INVALID


def validate_status(v: Any) -> str | None:
    return None if v in STATUSES else STATUS_INVALID


def validate_province(v: Any) -> str | None:
    return None if v in PROVINCES else PROVINCE_INVALID


def validate_city(v: Any) -> str | None:
    return CITY_REQUIRED if is_blank(v) else None


def validate_project(record: ProjectRecord) -> list[str]:
    """Check a candidate project against every rule; an empty list means valid.

    All rules run even after one fails, so callers can show the full set of
    problems at once. Latitude/longitude are accepted as given.
    """
    checks = (
        validate_name(record.name),
        validate_budget(record.budget),
        validate_status(record.status),
        validate_province(record.province),
        validate_city(record.city),
    )
    return [msg for msg in checks if msg]
