import json
from decimal import Decimal

import pytest

from infra_api.core.errors import ClientInputError
from infra_api.crud.projects import _dec
from infra_api.db.models.project import Project
from infra_api.services.etl.importer import detect_parser, import_records, run_import
from infra_api.services.etl.parsers.json_projects import parse_projects_json
from infra_api.services.etl.parsers.xml_projects import parse_projects_xml
from infra_api.services.etl.records import ProjectRecord
from infra_api.services.etl.validators import PROVINCE_INVALID

from conftest import project_payload


def _json(rows) -> bytes:
    return json.dumps({"projects": rows}).encode()


def test_detect_parser_by_extension():
    assert detect_parser("a.json") is parse_projects_json
    assert detect_parser("B.XML") is parse_projects_xml
    for name in ("a.csv", "json", None, ""):
        with pytest.raises(ClientInputError):
            detect_parser(name)


def test_invalid_record_does_not_stop_batch(db, profanity):
    rows = [
        project_payload(name="One"),
        project_payload(name="Two", province="Atlantis"),
        project_payload(name="Three"),
    ]
    summary = run_import(db, "batch.json", _json(rows), profanity)

    assert summary.total == 3
    assert [s["name"] for s in summary.successful] == ["One", "Three"]
    assert summary.failed == [{"identifier": "Two", "errors": [PROVINCE_INVALID]}]
    assert db.query(Project).count() == 2


def test_insert_failure_is_reported_per_record(db, profanity):
    # latitude is NOT NULL in the table but not checked by the validator
    records = [
        ProjectRecord(name="NoCoords", budget=10, status="planning", province="Quebec", city="Laval"),
        ProjectRecord(name="Fine", budget=10, status="completed", province="Quebec", city="Laval",
                      latitude=45.6, longitude=-73.7),
    ]
    summary = import_records(db, records, profanity)

    assert len(summary.failed) == 1
    assert summary.failed[0]["identifier"] == "NoCoords"
    assert summary.failed[0]["errors"]
    assert [s["name"] for s in summary.successful] == ["Fine"]
    assert db.query(Project).count() == 1


def test_unnamed_invalid_record_is_unknown(db, profanity):
    summary = import_records(db, [ProjectRecord(budget=5)], profanity)
    assert summary.failed[0]["identifier"] == "Unknown"
    assert len(summary.failed[0]["errors"]) == 4


def test_empty_batch_is_rejected_before_db(db, profanity):
    with pytest.raises(ClientInputError) as exc:
        run_import(db, "empty.json", b"[]", profanity)
    assert exc.value.message == "No valid projects found in file"
    assert db.query(Project).count() == 0


def test_names_are_masked_on_import(db, profanity):
    summary = run_import(db, "p.json", _json([project_payload(name="Frack Bridge")]), profanity)
    stored = db.query(Project).one()
    assert "frack" not in stored.name.lower()
    assert "*" in stored.name
    assert summary.successful[0]["name"] == stored.name


def test_summary_shape(db, profanity):
    out = run_import(db, "p.json", _json([project_payload()]), profanity).to_dict()
    assert out["message"] == "Import completed"
    assert (out["total"], out["successful"], out["failed"]) == (1, 1, 0)
    assert out["details"]["failed"] == []


def test_oversized_number_fails_only_its_record(db, profanity):
    rows = [project_payload(name="Huge", latitude=10**400), project_payload(name="Normal")]
    summary = run_import(db, "p.json", _json(rows), profanity)

    assert summary.total == 2
    assert [s["name"] for s in summary.successful] == ["Normal"]
    assert summary.failed[0]["identifier"] == "Huge"
    assert db.query(Project).count() == 1


def test_unreadable_coordinates_are_not_stored(db, profanity):
    xml = b"""<projects>
  <project><name>Bad</name><budget>10</budget><status>planning</status><province>Ontario</province>
    <city>Ottawa</city><latitude>abc</latitude><longitude>-75.7</longitude></project>
  <project><name>Good</name><budget>10</budget><status>planning</status><province>Ontario</province>
    <city>Ottawa</city><latitude>45.4</latitude><longitude>-75.7</longitude></project>
</projects>"""
    summary = run_import(db, "p.xml", xml, profanity)

    assert [f["identifier"] for f in summary.failed] == ["Bad"]
    stored = db.query(Project).one()
    assert stored.name == "Good"
    assert float(stored.latitude) == 45.4


def test_non_finite_values_map_to_null():
    assert _dec(float("nan")) is None
    assert _dec(float("inf")) is None
    assert _dec(None) is None
    assert _dec(45.4) == Decimal("45.4")


def test_coordinates_have_no_range_limit(db, profanity):
    summary = run_import(db, "p.json", _json([project_payload(latitude=12345.678, longitude=-99999.5)]), profanity)
    assert summary.failed == []
    assert float(db.query(Project).one().latitude) == 12345.678
