"""Tests for the mcp-meili-search command line interface."""

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from mcp_meili_search import __version__
from mcp_meili_search.cli.main import app
from mcp_meili_search.core.client import IndexMetadata
from mcp_meili_search.core.exceptions import UpstreamError

runner = CliRunner()


class TestServeCommand:
    def test_missing_host_exits_non_zero(self):
        result = runner.invoke(app, ["serve", "--index", "movies"])
        assert result.exit_code == 1

    def test_missing_index_exits_non_zero(self):
        result = runner.invoke(app, ["serve", "--host", "http://localhost:7700"])
        assert result.exit_code == 1

    def test_flags_are_passed_to_server(self):
        with patch(
            "mcp_meili_search.cli.commands.serve.run_mcp_server", new_callable=AsyncMock
        ) as run:
            result = runner.invoke(
                app,
                [
                    "serve",
                    "--host",
                    "http://localhost:7700",
                    "--index",
                    "movies",
                    "--embedder",
                    "openai",
                ],
            )

        assert result.exit_code == 0
        config = run.await_args.args[0]
        assert config.host == "http://localhost:7700"
        assert config.index == "movies"
        assert config.embedder == "openai"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("MEILI_HOST", "http://env-host:7700")
        monkeypatch.setenv("MEILI_INDEX", "books")
        with patch(
            "mcp_meili_search.cli.commands.serve.run_mcp_server", new_callable=AsyncMock
        ) as run:
            result = runner.invoke(app, ["serve", "--index", "movies"])

        assert result.exit_code == 0
        config = run.await_args.args[0]
        assert config.host == "http://env-host:7700"
        assert config.index == "movies"

    def test_fatal_server_failure_exits_non_zero(self):
        with patch(
            "mcp_meili_search.cli.commands.serve.run_mcp_server",
            new_callable=AsyncMock,
            side_effect=UpstreamError("meilisearch index 'movies' not found"),
        ):
            result = runner.invoke(
                app, ["serve", "--host", "http://localhost:7700", "--index", "movies"]
            )

        assert result.exit_code == 1


class TestInspectCommand:
    def test_lists_attributes(self):
        with patch(
            "mcp_meili_search.cli.commands.inspect_cmd._fetch_metadata",
            new_callable=AsyncMock,
            return_value=IndexMetadata(("genre", "author")),
        ):
            result = runner.invoke(
                app, ["inspect", "--host", "http://localhost:7700", "--index", "movies"]
            )

        assert result.exit_code == 0

    def test_reports_successful_connection(self):
        with (
            patch(
                "mcp_meili_search.cli.commands.inspect_cmd._fetch_metadata",
                new_callable=AsyncMock,
                return_value=IndexMetadata(("genre", "author")),
            ),
            patch(
                "mcp_meili_search.cli.commands.inspect_cmd.print_success"
            ) as mock_success,
        ):
            result = runner.invoke(
                app, ["inspect", "--host", "http://localhost:7700", "--index", "movies"]
            )

        assert result.exit_code == 0
        mock_success.assert_called_once_with(
            "Connected to index 'movies' (2 filterable attributes)"
        )

    def test_no_success_message_when_unreachable(self):
        with (
            patch(
                "mcp_meili_search.cli.commands.inspect_cmd._fetch_metadata",
                new_callable=AsyncMock,
                side_effect=UpstreamError("meilisearch request failed"),
            ),
            patch(
                "mcp_meili_search.cli.commands.inspect_cmd.print_success"
            ) as mock_success,
        ):
            result = runner.invoke(
                app, ["inspect", "--host", "http://localhost:7700", "--index", "movies"]
            )

        assert result.exit_code == 1
        mock_success.assert_not_called()

    def test_unreachable_index(self):
        with patch(
            "mcp_meili_search.cli.commands.inspect_cmd._fetch_metadata",
            new_callable=AsyncMock,
            side_effect=UpstreamError("meilisearch request failed"),
        ):
            result = runner.invoke(
                app, ["inspect", "--host", "http://localhost:7700", "--index", "movies"]
            )

        assert result.exit_code == 1


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
