import pytest
from sqlalchemy.exc import OperationalError

from hostprompt import storage
from hostprompt.errors import NotFound


def _flaky(failures):
    calls = {"n": 0}

    def op():
        calls["n"] += 1
        if calls["n"] <= failures:
            raise OperationalError("SELECT 1", {}, Exception("gone away"))
        return "ok"

    return op, calls


def test_with_retry_recovers(app):
    op, calls = _flaky(2)
    assert storage.with_retry(op, attempts=3, delay=0) == "ok"
    assert calls["n"] == 3


def test_with_retry_gives_up(app):
    op, calls = _flaky(5)
    with pytest.raises(OperationalError):
        storage.with_retry(op, attempts=3, delay=0)
    assert calls["n"] == 3


def test_with_retry_does_not_retry_other_errors(app):
    calls = {"n": 0}

    def op():
        calls["n"] += 1
        raise KeyError("nope")

    with pytest.raises(KeyError):
        storage.with_retry(op, attempts=3, delay=0)
    assert calls["n"] == 1


def test_require_property_rejects_bad_ids(app):
    for bad in (None, "abc", 12345):
        with pytest.raises(NotFound):
            storage.require_property(bad)


def test_save_content_reports_duplicates(app, make_property):
    prop = make_property()
    fields = {
        "property_id": prop.id,
        "title": "t",
        "content": "c",
        "content_type": "house_rules",
        "keywords": [],
    }
    first, created = storage.save_content(1, dict(fields))
    assert created is True
    again, created = storage.save_content(1, dict(fields))
    assert created is False
    assert again.id == first.id
