"""Tests for CLI commands."""

from pathlib import Path

import httpx
import pytest
from agora.cli import cli
from click.testing import CliRunner


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch):
    """Route every AsyncClient the CLI creates to a mock handler."""
    real_client = httpx.AsyncClient
    calls: list[httpx.Request] = []
    handlers = {"current": lambda request: httpx.Response(404)}
    clients: list[httpx.AsyncClient] = []

    def handle(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handlers["current"](request)

    def factory(**kwargs) -> httpx.AsyncClient:
        client = real_client(transport=httpx.MockTransport(handle), **kwargs)
        clients.append(client)
        return client

    monkeypatch.setattr(httpx, "AsyncClient", factory)

    def install(handler) -> list[httpx.Request]:
        handlers["current"] = handler
        return calls

    install.clients = clients  # type: ignore[attr-defined]
    return install


class TestRoutesCommand:
    """Tests for the routes command."""

    def test__default_config__lists_users_route(self, tmp_path: Path) -> None:
        config_file = tmp_path / "agora.toml"
        config_file.write_text("")

        runner = CliRunner()
        result = runner.invoke(cli, ["routes", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "GET" in result.output
        assert "http://localhost:3001/api/users" in result.output

    def test__base_url_option__overrides_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "agora.toml"
        config_file.write_text('[api]\nbase_url = "http://from-config/api"')

        runner = CliRunner()
        result = runner.invoke(
            cli, ["routes", "-c", str(config_file), "-u", "http://override/api/"]
        )

        assert result.exit_code == 0
        assert "http://override/api/users" in result.output
        assert "from-config" not in result.output

    def test__client__closed_after_listing(self, tmp_path: Path, backend) -> None:
        config_file = tmp_path / "agora.toml"
        config_file.write_text("")

        runner = CliRunner()
        result = runner.invoke(cli, ["routes", "-c", str(config_file)])

        assert result.exit_code == 0
        assert len(backend.clients) == 1
        assert backend.clients[0].is_closed

    def test__invalid_config__fails_with_error(self, tmp_path: Path) -> None:
        """Fail gracefully when the config file is invalid."""
        config_file = tmp_path / "agora.toml"
        config_file.write_text("[shell]\nbreakpoint = 0")

        runner = CliRunner()
        result = runner.invoke(cli, ["routes", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "shell.breakpoint must be positive" in result.output

    def test__missing_config__fails(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["routes", "-c", str(tmp_path / "missing.toml")])

        assert result.exit_code != 0


class TestUsersCommand:
    """Tests for the users command."""

    def test__backend_ok__prints_users(self, tmp_path: Path, backend, users_payload) -> None:
        calls = backend(lambda request: httpx.Response(200, json=users_payload))
        config_file = tmp_path / "agora.toml"
        config_file.write_text('[api]\nbase_url = "http://backend.test/api"')

        runner = CliRunner()
        result = runner.invoke(cli, ["users", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "1\tAlice\talice@example.com" in result.output
        assert "2\tBob\tbob@example.com" in result.output
        assert str(calls[0].url) == "http://backend.test/api/users"

    def test__no_users__prints_placeholder(self, tmp_path: Path, backend) -> None:
        backend(lambda request: httpx.Response(200, json={"users": []}))
        config_file = tmp_path / "agora.toml"
        config_file.write_text("")

        runner = CliRunner()
        result = runner.invoke(cli, ["users", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "No users." in result.output

    def test__backend_error__exits_with_error(self, tmp_path: Path, backend) -> None:
        backend(lambda request: httpx.Response(503))
        config_file = tmp_path / "agora.toml"
        config_file.write_text("")

        runner = CliRunner()
        result = runner.invoke(cli, ["users", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "503" in result.output

    def test__raw__prints_status_and_body(self, tmp_path: Path, backend) -> None:
        """Raw mode prints the envelope even for failing statuses."""
        backend(lambda request: httpx.Response(404, headers={"X-Trace": "abc"}))
        config_file = tmp_path / "agora.toml"
        config_file.write_text("")

        runner = CliRunner()
        result = runner.invoke(cli, ["users", "--raw", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "Status: 404" in result.output
        assert "x-trace: abc" in result.output
        assert "null" in result.output
