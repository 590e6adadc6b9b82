import logging
from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from app.models.contact_messages import ContactMessage, MessageStatus
from app.schemas.contact_messages import ContactMessageCreate, ContactSubmission
from app.utils.contact_service import (
    ContactNotFoundError,
    ContactStoreError,
    mask_email,
    submit_contact_message,
    update_message_status,
)
from app.utils.validators import ContactValidationError


def make_data(**overrides):
    data = {"message": "Hello there, this is a test.", "is_anonymous": True, "name": "Anonymous", "email": None}
    data.update(overrides)
    return ContactMessageCreate(**data)


def test_insert_assigns_id_timestamp_and_default_status(store):
    record = store.insert(make_data(), ip="10.0.0.1")
    assert record.id
    assert record.timestamp is not None
    assert record.status == MessageStatus.new
    assert record.ip == "10.0.0.1"


def test_list_all_is_newest_first(store):
    now = datetime.utcnow()
    oldest = store.insert(make_data(), timestamp=now - timedelta(minutes=2))
    newest = store.insert(make_data(), timestamp=now)
    middle = store.insert(make_data(), timestamp=now - timedelta(minutes=1))

    ids = [m.id for m in store.list_all()]
    assert ids == [newest.id, middle.id, oldest.id]


def test_update_status_returns_updated_record(store):
    record = store.insert(make_data())
    updated = store.update_status(record.id, MessageStatus.read)
    assert updated.id == record.id
    assert updated.status == MessageStatus.read


def test_update_status_unknown_id_returns_none(store):
    assert store.update_status("does-not-exist", MessageStatus.read) is None


def test_update_message_status_raises_not_found(store):
    with pytest.raises(ContactNotFoundError):
        update_message_status("does-not-exist", MessageStatus.replied, store)


def test_storage_fault_becomes_store_error(store, db, monkeypatch):
    def broken_commit():
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", broken_commit)
    with pytest.raises(ContactStoreError):
        store.insert(make_data())


def test_submit_rejects_invalid_payload_without_writing(store, db):
    payload = ContactSubmission(message="too short", isAnonymous=True)
    with pytest.raises(ContactValidationError):
        submit_contact_message(payload, "127.0.0.1", store)
    assert db.query(ContactMessage).count() == 0


def test_submit_logs_masked_entry(store, caplog):
    payload = ContactSubmission(
        message="A fairly long message that will be cut in the log preview line.",
        isAnonymous=False,
        name="Jo",
        email="Jo@Example.com",
    )
    with caplog.at_level(logging.INFO, logger="app.utils.contact_service"):
        record = submit_contact_message(payload, "127.0.0.1", store)

    assert record.email == "jo@example.com"
    assert record.ip == "127.0.0.1"
    logged = caplog.text
    assert record.id in logged
    assert "j***@example.com" in logged
    assert "jo@example.com" not in logged
    assert "A fairly long message that will be cut in the log ..." in logged


@pytest.mark.parametrize("email,expected", [(None, "N/A"), ("", "N/A"), ("jo@example.com", "j***@example.com")])
def test_mask_email(email, expected):
    assert mask_email(email) == expected
