import runpy
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from idracctl.cli import main
from idracctl.exceptions import CommandNotFoundError, ProtocolError
from idracctl.handlers import HandlerContext, HelpHandler, QueryHandler
from idracctl.models import Command
from idracctl.repositories.handler_registry import HandlerRegistry
from idracctl.services.dispatcher import CommandDispatcher


def test_registry_is_closed_and_ordered():
    assert HandlerRegistry.get_command_names() == [
        "login", "logout", "power", "boot_settings", "query", "console", "help",
    ]


def test_registry_creates_handlers():
    context = HandlerContext(output=MagicMock())

    assert isinstance(HandlerRegistry.create_handler("query", context), QueryHandler)
    assert isinstance(HandlerRegistry.create_handler("help", context), HelpHandler)


def test_unknown_command_raises():
    dispatcher = CommandDispatcher(HandlerContext(output=MagicMock()))

    with pytest.raises(CommandNotFoundError, match='"reboot" was not found'):
        dispatcher.run(["reboot"])


def test_empty_command_raises():
    dispatcher = CommandDispatcher(HandlerContext(output=MagicMock()))

    with pytest.raises(CommandNotFoundError):
        dispatcher.dispatch(Command.empty())


def test_dispatch_invokes_handler_with_command():
    handler = MagicMock()
    command = Command(name="power", arguments={"": ["on"]})

    with patch.object(HandlerRegistry, "create_handler", return_value=handler) as create:
        CommandDispatcher(HandlerContext(output=MagicMock())).dispatch(command)

    assert create.call_args[0][0] == "power"
    handler.handle.assert_called_once_with(command)


def test_main_success(capsys):
    assert main(["help"]) == 0
    assert "Possible attributes:" in capsys.readouterr().out


def test_main_unknown_command(capsys):
    assert main(["frobnicate"]) == 1
    assert 'The command "frobnicate" was not found.' in capsys.readouterr().out


def test_main_no_command(capsys):
    assert main([]) == 1
    assert "No command given" in capsys.readouterr().out


def test_main_requires_login(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("IDRAC_CREDENTIALS_DIR", raising=False)

    assert main(["query", "pwState"]) == 1
    out = capsys.readouterr().out
    assert "The command exited with an error:" in out
    assert "You should log in first" in out


def test_main_reports_protocol_error_body(capsys):
    error = ProtocolError(503, '{"root": {"status": "busy"}}')

    with patch.object(CommandDispatcher, "run", side_effect=error):
        assert main(["query", "fans"]) == 1

    out = capsys.readouterr().out
    assert "got a non 200 status: 503" in out
    assert '"busy"' in out


def test_main_logout_without_credentials(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("IDRAC_CREDENTIALS_DIR", raising=False)

    assert main(["logout"]) == 0


def test_root_script_runs_main(monkeypatch, capsys):
    script = Path(__file__).resolve().parent.parent / "idrac_cli.py"
    monkeypatch.setattr(sys, "argv", [str(script), "help"])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_path(str(script), run_name="__main__")

    assert excinfo.value.code == 0
    assert "Possible attributes:" in capsys.readouterr().out
