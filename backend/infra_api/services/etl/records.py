import math
from dataclasses import dataclass
from typing import Any

import pandas as pd

TEXT_FIELDS = ("name", "status", "province", "city")
NUMERIC_FIELDS = ("budget", "latitude", "longitude")
FIELDS = TEXT_FIELDS + NUMERIC_FIELDS


@dataclass
class ProjectRecord:
    """A project read from an uploaded file, not validated yet.

    Numeric fields that were present but could not be read as numbers hold ``NaN``;
    absent fields are ``None``.
    """
    name: str | None = None
    budget: float | None = None
    status: str | None = None
    province: str | None = None
    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @property
    def identifier(self) -> str:
        name = (self.name or "").strip()
        return name or "Unknown"


def _scalar(v: Any) -> Any:
    # nested objects/lists are not a field value
    if isinstance(v, (dict, list, tuple, set)):
        return None
    return v


def _text_in(v: Any) -> str | None:
    v = _scalar(v)
    if v is None or (isinstance(v, float) and math.isnan(v)):
        return None
    return v if isinstance(v, str) else str(v)


def _numeric_in(v: Any) -> Any:
    v = _scalar(v)
    if v is None or isinstance(v, (str, float)):
        return v
    # true/false are not numbers
    if isinstance(v, bool):
        return math.nan
    if isinstance(v, int):
        try:
            return float(v)
        except OverflowError:
            return math.nan
    return math.nan


def _number(v: Any) -> float | None:
    if v is None:
        return None
    try:
        return float(v)
    except OverflowError:
        return math.nan


def records_from_frame(df: pd.DataFrame) -> list[ProjectRecord]:
    """Expects an object-dtype frame where ``None`` marks an absent field."""
    if df.empty:
        return []
    out = pd.DataFrame(index=df.index)
    for c in TEXT_FIELDS:
        out[c] = df[c] if c in df.columns else None
    for c in NUMERIC_FIELDS:
        if c in df.columns:
            present = df[c].map(lambda v: v is not None)
            out[c] = pd.to_numeric(df[c], errors="coerce").astype(object)
            # missing stays None, present-but-unreadable stays NaN
            out.loc[~present, c] = None
        else:
            out[c] = None

    records = []
    for row in out.to_dict(orient="records"):
        records.append(ProjectRecord(
            name=row["name"],
            budget=_number(row["budget"]),
            status=row["status"],
            province=row["province"],
            city=row["city"],
            latitude=_number(row["latitude"]),
            longitude=_number(row["longitude"]),
        ))
    return records


def records_from_rows(rows: list[dict]) -> list[ProjectRecord]:
    # each value is normalised on its own so one odd value can't break the frame
    cleaned = []
    for r in rows:
        row = {c: _text_in(r.get(c)) for c in TEXT_FIELDS}
        row.update({c: _numeric_in(r.get(c)) for c in NUMERIC_FIELDS})
        cleaned.append(row)
    return records_from_frame(pd.DataFrame(cleaned, columns=list(FIELDS), dtype=object))
