from unittest.mock import MagicMock

import pytest

from idracctl.config import ClientConfig
from idracctl.exceptions import AuthError, ParseError, TransportError
from idracctl.handlers import HandlerContext
from idracctl.models import Attribute, BootDevice, PowerState, SessionCredential
from idracctl.parsers import ArgumentParser
from idracctl.repositories import CredentialStore
from idracctl.services.dispatcher import CommandDispatcher


@pytest.fixture
def client():
    client = MagicMock()
    client.host = "10.0.0.5"
    client.__enter__.return_value = client
    client.login.return_value = "tok-123"
    client.query.return_value = '{"root": {}}'
    client.set_power_state.return_value = '{"root": {"status": "ok"}}'
    client.set_boot_override.return_value = '{"root": {"status": "ok"}}'
    return client


@pytest.fixture
def context(tmp_path, client):
    output = []
    ctx = HandlerContext(
        config=ClientConfig(verify_tls=False, connect_timeout=1, read_timeout=2, credentials_dir=str(tmp_path)),
        output=output.append,
        client_factory=MagicMock(return_value=client),
        poll_loop_factory=MagicMock(),
    )
    ctx.lines = output
    return ctx


@pytest.fixture
def logged_in(context):
    context.store.save(SessionCredential(host="10.0.0.5", username="root", auth_token="tok-123"))
    return context


def run(context, line):
    CommandDispatcher(context).dispatch(ArgumentParser.parse(line.split(" ")))


def test_login_persists_credential(context, client):
    run(context, "login -u root -p calvin -h 10.0.0.5")

    context.client_factory.assert_called_once_with("10.0.0.5", verify_tls=False, timeout=(1, 2))
    client.login.assert_called_once_with("root", "calvin")
    client.close.assert_called_once()
    assert context.store.load() == SessionCredential(host="10.0.0.5", username="root", auth_token="tok-123")
    assert context.lines == ["logging in to root@10.0.0.5"]


@pytest.mark.parametrize("line", [
    "login -u root -p calvin",
    "login -u root -h 10.0.0.5",
    "login -p calvin -h 10.0.0.5",
    "login root calvin 10.0.0.5",
])
def test_login_requires_all_flags(context, line):
    with pytest.raises(ParseError, match="-u"):
        run(context, line)
    context.client_factory.assert_not_called()


def test_login_twice_to_same_host_is_rejected(logged_in):
    with pytest.raises(AuthError, match="already logged in"):
        run(logged_in, "login -u root -p calvin -h 10.0.0.5")


def test_login_to_other_host_replaces_credential(logged_in, client):
    client.login.return_value = "tok-999"

    run(logged_in, "login -u admin -p pw -h 10.0.0.6")

    assert logged_in.store.load().host == "10.0.0.6"
    assert logged_in.store.load().auth_token == "tok-999"


@pytest.mark.parametrize("content", ["not json", '{"AuthToken": "abc"}'])
def test_login_overwrites_unreadable_credentials(context, client, content):
    context.store.path.write_text(content)

    run(context, "login -u root -p calvin -h 10.0.0.5")

    client.login.assert_called_once_with("root", "calvin")
    assert context.store.load() == SessionCredential(host="10.0.0.5", username="root", auth_token="tok-123")


def test_login_failure_keeps_store_empty(context, client):
    client.login.side_effect = AuthError("could not find auth token in cookie")

    with pytest.raises(AuthError):
        run(context, "login -u root -p bad -h 10.0.0.5")
    assert context.store.load() is None


def test_logout_removes_credential(logged_in):
    run(logged_in, "logout")
    assert not logged_in.store.exists()


def test_logout_without_credential_succeeds(context):
    run(context, "logout")
    assert not context.store.exists()


def test_commands_require_login(context):
    with pytest.raises(AuthError, match="log in first"):
        run(context, "query pwState")
    with pytest.raises(AuthError):
        run(context, "power on")


def test_power_sets_state(logged_in, client):
    run(logged_in, "power graceful_shutdown")

    logged_in.client_factory.assert_called_once_with(
        "10.0.0.5", verify_tls=False, timeout=(1, 2), auth_token="tok-123", username="root"
    )
    client.set_power_state.assert_called_once_with(PowerState.GRACEFUL_SHUTDOWN)
    assert logged_in.lines == ['{"root": {"status": "ok"}}']


@pytest.mark.parametrize("line", ["power", "power reboot"])
def test_power_rejects_missing_or_unknown_state(logged_in, client, line):
    with pytest.raises(ParseError, match="power state"):
        run(logged_in, line)
    client.set_power_state.assert_not_called()


def test_boot_settings(logged_in, client):
    run(logged_in, "boot_settings -once local_cd")
    client.set_boot_override.assert_called_once_with(BootDevice.LOCAL_CD, True)


def test_boot_settings_persistent(logged_in, client):
    run(logged_in, "boot_settings pxe")
    client.set_boot_override.assert_called_once_with(BootDevice.PXE, False)


def test_query_passes_tokens_through(logged_in, client):
    run(logged_in, "query pwState,temperatures notARealAttr")

    client.query.assert_called_once_with("pwState", "temperatures", "notARealAttr")
    assert logged_in.lines == ['{"root": {}}']
    logged_in.poll_loop_factory.assert_not_called()


def test_query_requires_attributes(logged_in):
    with pytest.raises(ParseError):
        run(logged_in, "query")


def test_query_watch_starts_poll_loop(logged_in, client):
    run(logged_in, "query -watch 2m fans voltages")

    client.query.assert_called_once_with("fans", "voltages")
    query, interval, output = logged_in.poll_loop_factory.call_args[0]
    assert interval == 120.0
    assert output == logged_in.output
    logged_in.poll_loop_factory.return_value.run_until_interrupted.assert_called_once()

    query()
    assert client.query.call_count == 2


def test_query_watch_invalid_duration(logged_in, client):
    with pytest.raises(ParseError, match="duration"):
        run(logged_in, "query -watch soon fans")
    client.query.assert_not_called()


def test_query_transport_error_propagates(logged_in, client):
    client.query.side_effect = TransportError("could not make request")

    with pytest.raises(TransportError):
        run(logged_in, "query fans")


def test_console_downloads_viewer(logged_in, client, tmp_path):
    client.download_console_viewer.return_value = tmp_path / "viewer.jnlp"

    run(logged_in, f"console -o {tmp_path / 'viewer.jnlp'}")

    client.download_console_viewer.assert_called_once_with(str(tmp_path / "viewer.jnlp"))
    assert logged_in.lines == [f"console viewer saved to {tmp_path / 'viewer.jnlp'}"]


def test_help_lists_commands_and_attributes(context):
    run(context, "help")

    text = context.lines[0]
    assert "login -u [username] -p [password] -h [host]: logs you in" in text
    assert "power [on|off|cold_reboot|warm_reboot|nmi|graceful_shutdown]" in text
    assert "query [-watch 1[s|m|h]]" in text
    assert "Possible attributes:" in text
    for attribute in Attribute:
        assert attribute.value in text
    context.client_factory.assert_not_called()


def test_help_does_not_need_credentials(context):
    assert isinstance(context.store, CredentialStore)
    run(context, "help")
    assert not context.store.exists()
