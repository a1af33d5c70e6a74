from __future__ import annotations

from datetime import timedelta

import pytest

from models.refresh_token import RefreshToken
from models.refresh_token_ledger import RefreshTokenLedger
from models.user_store import CredentialStore
from utils.exceptions import DuplicateLogin
from utils.security import utcnow


@pytest.fixture()
def user_id(storage):
    uid = CredentialStore(storage).create_user("bob", "hash")
    storage.save()
    return uid


@pytest.fixture()
def ledger(storage):
    return RefreshTokenLedger(storage)


def test_duplicate_login_rejected(storage, user_id):
    with pytest.raises(DuplicateLogin):
        CredentialStore(storage).create_user("bob", "other-hash")


def test_find_user_by_login(storage, user_id):
    store = CredentialStore(storage)
    assert store.find_user_by_login("bob").id == user_id
    assert store.find_user_by_login("nobody") is None


def test_record_and_find_unconsumed(storage, ledger, user_id):
    row = ledger.record(user_id, "tok-1", utcnow() + timedelta(days=7))
    storage.save()

    found = ledger.find_unconsumed("tok-1")
    assert found is not None
    assert found.id == row.id
    assert found.consumed is False
    assert ledger.find_unconsumed("tok-unknown") is None


def test_mark_consumed_flips_once(storage, ledger, user_id):
    row = ledger.record(user_id, "tok-1", utcnow() + timedelta(days=7))
    storage.save()

    assert ledger.mark_consumed(row.id) is True
    assert ledger.mark_consumed(row.id) is False
    storage.save()

    assert ledger.find_unconsumed("tok-1") is None


def test_find_unconsumed_ignores_expiry(storage, ledger, user_id):
    ledger.record(user_id, "tok-old", utcnow() - timedelta(seconds=1))
    storage.save()
    assert ledger.find_unconsumed("tok-old") is not None


def test_prune_removes_consumed_and_expired(storage, ledger, user_id):
    now = utcnow()
    live = ledger.record(user_id, "tok-live", now + timedelta(days=7))
    used = ledger.record(user_id, "tok-used", now + timedelta(days=7))
    ledger.record(user_id, "tok-expired", now - timedelta(minutes=1))
    storage.save()
    ledger.mark_consumed(used.id)
    storage.save()

    assert ledger.prune(now) == 2

    remaining = storage.get_session().query(RefreshToken).all()
    assert [r.id for r in remaining] == [live.id]


def test_prune_with_nothing_to_do(storage, ledger, user_id):
    ledger.record(user_id, "tok-live", utcnow() + timedelta(days=7))
    storage.save()
    assert ledger.prune(utcnow()) == 0
