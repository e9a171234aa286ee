# File: tests/test_account_service.py

import logging

import jwt
import pytest

from accounts_api.core.errors import Conflict, InvalidInput, NotFound, Unauthorized
from accounts_api.core.security import ALGORITHM
from accounts_api.services.account_service import AccountService

from conftest import TEST_SECRET


class RecordingStore:
    """Fails the test if the service touches storage."""

    def __getattr__(self, name):
        pytest.fail(f"store.{name} called for invalid input")


def test_blank_secret_is_rejected(store):
    with pytest.raises(ValueError):
        AccountService(store, "")
    with pytest.raises(ValueError):
        AccountService(store, None)


# ---------- signUp ----------


def test_sign_up_invalid_input(service):
    with pytest.raises(InvalidInput):
        service.sign_up("bademail", "badpassword")


def test_sign_up_distinguishes_bad_email_and_password(service):
    with pytest.raises(InvalidInput, match="email"):
        service.sign_up("bademail", "Password#1")
    with pytest.raises(InvalidInput, match="password"):
        service.sign_up("test@example.com", "badpassword")


def test_invalid_input_never_reaches_store():
    service = AccountService(RecordingStore(), TEST_SECRET)
    with pytest.raises(InvalidInput):
        service.sign_up("bademail", "Password#1")
    with pytest.raises(InvalidInput):
        service.login("test@example.com", "short")


def test_sign_up_creates_user(service, store):
    result = service.sign_up("test@example.com", "Password#1")

    assert result.message == "User created successfully"
    assert result.user.email == "test@example.com"
    assert not hasattr(result.user, "password")

    stored = store.find_by_email("test@example.com")
    assert stored.id == result.user.id
    assert stored.password != "Password#1"


def test_sign_up_existing_email(service):
    service.sign_up("existing@example.com", "Password#1")
    with pytest.raises(Conflict, match="Email already exists"):
        service.sign_up("existing@example.com", "Password#1")


def test_sign_up_race_surfaces_conflict(service, store, monkeypatch):
    store.create("raced@example.com", "hash")
    # the existence check misses the row written by a concurrent request
    monkeypatch.setattr(store, "find_by_email", lambda email: None)
    with pytest.raises(Conflict):
        service.sign_up("raced@example.com", "Password#1")


# ---------- login ----------


def test_login_success(service):
    created = service.sign_up("test@example.com", "Password#1")
    result = service.login("test@example.com", "Password#1")

    assert result.message == "User logged in successfully"
    assert result.user == created.user
    assert result.token
    payload = jwt.decode(result.token, TEST_SECRET, algorithms=[ALGORITHM])
    assert payload["id"] == str(created.user.id)


def test_login_token_expiry_setting(store):
    service = AccountService(store, TEST_SECRET, token_expire_minutes=15)
    service.sign_up("test@example.com", "Password#1")
    token = service.login("test@example.com", "Password#1").token
    assert "exp" in jwt.decode(token, TEST_SECRET, algorithms=[ALGORITHM])


def test_login_wrong_password(service):
    service.sign_up("test@example.com", "Password#1")
    with pytest.raises(Unauthorized, match="Invalid credentials"):
        service.login("test@example.com", "Password#2")


def test_login_unknown_email(service):
    with pytest.raises(NotFound, match="User does not exist"):
        service.login("nonexistent@example.com", "Password#1")


def test_login_invalid_input(service):
    with pytest.raises(InvalidInput):
        service.login("bademail", "badpassword")


# ---------- listUsers ----------


def test_list_users_empty(service):
    with pytest.raises(NotFound, match="No users found"):
        service.list_users()


def test_list_users_returns_stored_records(service, store):
    service.sign_up("a@example.com", "Password#1")
    service.sign_up("b@example.com", "Password#2")

    users = service.list_users()
    assert [u.email for u in users] == ["a@example.com", "b@example.com"]
    assert [u.id for u in users] == [u.id for u in store.list_all()]


def test_logs_do_not_contain_email(service, caplog):
    caplog.set_level(logging.DEBUG)
    service.sign_up("private@example.com", "Password#1")
    with pytest.raises(Conflict):
        service.sign_up("private@example.com", "Password#1")
    service.login("private@example.com", "Password#1")

    assert caplog.records
    assert all("private@example.com" not in r.getMessage() for r in caplog.records)
