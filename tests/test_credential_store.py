import json

import pytest

from idracctl.exceptions import AuthError
from idracctl.models import SessionCredential
from idracctl.repositories import CredentialStore, CREDENTIALS_FILE


def test_save_and_load(tmp_path):
    store = CredentialStore(tmp_path)
    credential = SessionCredential(host="10.0.0.5", username="root", auth_token="abc")

    store.save(credential)

    assert store.load() == credential
    on_disk = json.loads((tmp_path / CREDENTIALS_FILE).read_text())
    assert on_disk == {"Host": "10.0.0.5", "Username": "root", "AuthToken": "abc"}


def test_reads_file_without_username(tmp_path):
    (tmp_path / CREDENTIALS_FILE).write_text('{"Host": "10.0.0.5", "AuthToken": "abc"}')

    credential = CredentialStore(tmp_path).load()

    assert credential.host == "10.0.0.5"
    assert credential.username == ""
    assert credential.auth_token == "abc"


def test_missing_file(tmp_path):
    store = CredentialStore(tmp_path)

    assert store.load() is None
    with pytest.raises(AuthError, match="log in first"):
        store.require()


def test_corrupt_file_raises_auth_error(tmp_path):
    (tmp_path / CREDENTIALS_FILE).write_text("not json")

    with pytest.raises(AuthError):
        CredentialStore(tmp_path).load()


def test_delete_is_idempotent(tmp_path):
    store = CredentialStore(tmp_path)
    store.save(SessionCredential(host="h"))

    assert store.delete() is True
    assert store.delete() is False
    assert not store.exists()
