import json
import logging

import pytest

from gradcheck.data import StatusStore, parse_status, update, with_defaults
from gradcheck.errors import StatusStoreError
from gradcheck.models import CourseStatus


def test_missing_file_loads_empty(tmp_path):
    assert StatusStore(tmp_path / "statuses.json").load() == {}


def test_save_and_load_roundtrip(tmp_path):
    store = StatusStore(tmp_path / "nested" / "statuses.json")
    ledger = {
        "J2001": CourseStatus.PLANNED_ENROLLMENT,
        "J1001": CourseStatus.CREDIT_EARNED,
    }

    store.save(ledger)

    assert store.load() == ledger
    saved = json.loads(store.path.read_text(encoding="utf-8"))
    assert list(saved) == ["J1001", "J2001"]
    assert saved["J1001"] == "credit-earned"


@pytest.mark.parametrize("label, status", [
    ("未履修", CourseStatus.NOT_TAKEN),
    ("単位取得済み", CourseStatus.CREDIT_EARNED),
    ("単位なし（F）", CourseStatus.FAILED_NO_CREDIT),
    ("履修予定", CourseStatus.PLANNED_ENROLLMENT),
    ("履修かつF予定", CourseStatus.PLANNED_ENROLLMENT_EXPECTED_FAIL),
])
def test_legacy_labels_are_accepted(label, status):
    assert parse_status(label) is status


def test_legacy_file_loads(tmp_path):
    path = tmp_path / "statuses.json"
    path.write_text(json.dumps({"J1001": "単位取得済み"}, ensure_ascii=False), encoding="utf-8")

    assert StatusStore(path).load() == {"J1001": CourseStatus.CREDIT_EARNED}


def test_unknown_status_is_rejected(tmp_path):
    path = tmp_path / "statuses.json"
    path.write_text(json.dumps({"J1001": "passed"}), encoding="utf-8")

    with pytest.raises(StatusStoreError, match="passed"):
        StatusStore(path).load()


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_unreadable_file_loads_empty_with_warning(tmp_path, caplog, content):
    path = tmp_path / "statuses.json"
    path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="gradcheck.data.ledger"):
        assert StatusStore(path).load() == {}
    assert str(path) in caplog.text


def test_with_defaults_fills_missing_codes(make_course):
    a, b = make_course(), make_course()
    ledger = {a.code: CourseStatus.CREDIT_EARNED, "OLD1": CourseStatus.PLANNED_ENROLLMENT}

    filled = with_defaults(ledger, [a, b])

    assert filled == {
        a.code: CourseStatus.CREDIT_EARNED,
        b.code: CourseStatus.NOT_TAKEN,
        "OLD1": CourseStatus.PLANNED_ENROLLMENT,
    }
    assert b.code not in ledger


def test_update_returns_new_ledger():
    ledger = {"J1001": CourseStatus.NOT_TAKEN}

    updated = update(ledger, "J1001", CourseStatus.CREDIT_EARNED)

    assert updated["J1001"] is CourseStatus.CREDIT_EARNED
    assert ledger["J1001"] is CourseStatus.NOT_TAKEN


@pytest.mark.parametrize("value", [["credit-earned"], 5, None])
def test_non_string_status_is_rejected(tmp_path, value):
    path = tmp_path / "statuses.json"
    path.write_text(json.dumps({"X1": value}), encoding="utf-8")

    with pytest.raises(StatusStoreError, match="must be a string"):
        StatusStore(path).load()
