# ABOUTME: Tests for CLI argument parsing and command dispatch.
# ABOUTME: Validates argparse configuration, startup config failure and serve/migrate behavior.

import argparse
from unittest.mock import MagicMock, patch

import pytest

from weather_service.__main__ import cmd_migrate, cmd_serve, create_parser, main
from weather_service.config import Settings


class TestCreateParser:
    """Tests for argument parser creation."""

    def test_parser_creation(self) -> None:
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)

    def test_serve_command(self) -> None:
        args = create_parser().parse_args(["serve", "--port", "9090"])
        assert args.command == "serve"
        assert args.port == 9090
        assert args.host is None
        assert args.no_migrate is False

    def test_migrate_command(self) -> None:
        args = create_parser().parse_args(["migrate"])
        assert args.command == "migrate"
        assert args.revision == "head"


class TestMain:
    def test_missing_configuration_exits_with_error(self) -> None:
        """Startup fails cleanly when required settings are missing."""
        from pydantic import ValidationError

        with patch(
            "weather_service.__main__.get_settings",
            side_effect=ValidationError.from_exception_data("Settings", []),
        ):
            assert main(["serve"]) == 1

    def test_dispatches_migrate(self, mock_settings: Settings) -> None:
        with (
            patch("weather_service.__main__.get_settings", return_value=mock_settings),
            patch("weather_service.db.migrate.run_migrations") as mock_run,
        ):
            assert main(["migrate", "--revision", "001"]) == 0

        mock_run.assert_called_once_with(mock_settings, revision="001")


class TestCommands:
    def test_migrate_failure_returns_1(self, mock_settings: Settings) -> None:
        args = argparse.Namespace(revision="head")
        with patch(
            "weather_service.db.migrate.run_migrations", side_effect=RuntimeError("no db")
        ):
            assert cmd_migrate(args, mock_settings) == 1

    def test_serve_runs_migrations_then_uvicorn(self, mock_settings: Settings) -> None:
        args = argparse.Namespace(host=None, port=None, no_migrate=False)
        with (
            patch("weather_service.db.migrate.run_migrations") as mock_run,
            patch("uvicorn.run") as mock_uvicorn,
        ):
            assert cmd_serve(args, mock_settings) == 0

        mock_run.assert_called_once_with(mock_settings)
        kwargs = mock_uvicorn.call_args.kwargs
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8080

    def test_serve_can_skip_migrations(self, mock_settings: Settings) -> None:
        args = argparse.Namespace(host="127.0.0.1", port=9000, no_migrate=True)
        run = MagicMock()
        with (
            patch("weather_service.db.migrate.run_migrations", run),
            patch("uvicorn.run") as mock_uvicorn,
        ):
            assert cmd_serve(args, mock_settings) == 0

        run.assert_not_called()
        assert mock_uvicorn.call_args.kwargs["port"] == 9000

    @pytest.mark.parametrize("log_format", ["console", "json"])
    def test_configure_logging(self, log_format: str) -> None:
        from weather_service.__main__ import configure_logging

        configure_logging("DEBUG", log_format)
