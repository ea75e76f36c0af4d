"""Tests for CLI commands.

These tests verify that all CLI commands are properly registered and
wired to the client.
"""

import json

import pytest
import responses

from money_client.runner.main import create_cli, main
from money_client.session_store import FileSessionStore

from conftest import BASE_URL, TOKEN


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at the mock server and a temporary session file."""
    session_path = tmp_path / "session.json"
    monkeypatch.setenv("MONEY_API_URL", BASE_URL)
    monkeypatch.setenv("MONEY_SESSION_PATH", str(session_path))
    return ["-c", str(tmp_path / "config.yaml")], session_path


@pytest.fixture
def logged_in(cli_env, identity):
    args, session_path = cli_env
    store = FileSessionStore(session_path)
    store.identity = identity
    store.flush()
    return args, session_path


class TestCLICommandRegistry:
    """Tests for CLI command registration."""

    def test_all_commands_registered(self):
        parser = create_cli()

        subparsers_action = None
        for action in parser._actions:
            if action.dest == "command":
                subparsers_action = action
                break

        assert subparsers_action is not None

        commands = set(subparsers_action.choices.keys())
        assert commands == {
            "init-config",
            "login",
            "logout",
            "status",
            "transactions",
            "categories",
            "shortcuts",
            "notifications",
            "equity",
            "analytics",
        }

    def test_transactions_defaults(self):
        args = create_cli().parse_args(["transactions"])

        assert args.context == 0
        assert args.limit == 15
        assert args.fetch_all is False
        assert args.operation is None

    def test_transactions_rejects_unknown_operation(self):
        with pytest.raises(SystemExit):
            create_cli().parse_args(["transactions", "--operation", "refund"])

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1


class TestCLICommands:
    """End-to-end command runs against a mocked API."""

    @responses.activate
    def test_login_persists_identity(self, cli_env):
        args, session_path = cli_env
        responses.add(
            responses.POST,
            f"{BASE_URL}/identity/auth",
            json={"result": {"accessToken": "fresh", "user": {"id": 7}}},
        )

        assert main(args + ["login", "john@example.com", "--password", "secret"]) == 0

        sent = json.loads(responses.calls[0].request.body)
        assert sent == {"email": "john@example.com", "password": "secret"}
        assert FileSessionStore(session_path).get_access_token() == "fresh"

    def test_logout_clears_file(self, logged_in):
        args, session_path = logged_in

        assert main(args + ["logout"]) == 0
        assert FileSessionStore(session_path).identity is None

    @responses.activate
    def test_transactions_page(self, logged_in, sample_transactions, capsys):
        args, _ = logged_in
        responses.add(
            responses.GET,
            f"{BASE_URL}/transactions",
            json={"result": sample_transactions, "left": 7, "context": 0},
        )

        assert main(args + ["transactions", "--context", "10", "--limit", "5"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["context"] == 15
        assert output["left"] == 7
        assert responses.calls[0].request.headers["Authorization"] == f"Bearer {TOKEN}"

    @responses.activate
    def test_unauthorized_clears_persisted_session(self, logged_in):
        args, session_path = logged_in
        responses.add(responses.GET, f"{BASE_URL}/notifications", status=401, body="expired")

        assert main(args + ["notifications"]) == 1
        assert FileSessionStore(session_path).identity is None

    @responses.activate
    def test_analytics_filtered(self, logged_in, capsys):
        args, _ = logged_in
        responses.add(
            responses.GET,
            f"{BASE_URL}/analytics/basic",
            json={"result": [{"total": 42}]},
        )

        assert main(args + ["analytics", "--pattern", "coffee"]) == 0

        assert json.loads(capsys.readouterr().out) == [{"total": 42}]
        assert responses.calls[0].request.url == f"{BASE_URL}/analytics/basic?pattern=coffee"

    def test_invalid_base_url_rejected(self, cli_env, monkeypatch):
        args, _ = cli_env
        monkeypatch.setenv("MONEY_API_URL", "money.test")

        assert main(args + ["status"]) == 1

    def test_status_with_corrupt_session_file(self, cli_env, capsys):
        args, session_path = cli_env
        session_path.write_text("{broken")

        assert main(args + ["status"]) == 0
        assert "Logged in: no" in capsys.readouterr().out
