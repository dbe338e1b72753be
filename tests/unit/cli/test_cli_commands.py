"""Unit tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from hyrule_compendium import CompendiumClient
from hyrule_compendium.cli.commands.lookup import parse_identifier
from hyrule_compendium.cli.main import app
from hyrule_compendium.config import BASE_URL_ENV_VAR, LOG_LEVEL_ENV_VAR, CompendiumConfig
from hyrule_compendium.models import EntryIdentifier
from tests.conftest import (
    TEST_BASE_URL,
    apple,
    envelope,
    hyrule_bass,
    json_handler,
    master_sword,
    silver_moblin,
    treasure_chest,
    winterwing_butterfly,
)

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(BASE_URL_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


def mock_client(handler) -> CompendiumClient:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return CompendiumClient(TEST_BASE_URL, http_client=http_client)


class TestMainApp:
    """Tests for the main CLI application."""

    def test_help_output(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Compendium" in result.stdout

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])
        assert "lookup" in result.stdout.lower()
        assert "config" in result.stdout.lower()

    def test_invalid_base_url_flag(self) -> None:
        result = runner.invoke(app, ["--base-url", "nonsense", "config", "show"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout


class TestParseIdentifier:
    """Tests for command-line identifier parsing."""

    def test_digits_are_ids(self) -> None:
        assert parse_identifier("112") == EntryIdentifier.by_id(112)

    def test_everything_else_is_a_name(self) -> None:
        assert parse_identifier("silver moblin") == EntryIdentifier.by_name("silver moblin")
        assert parse_identifier("-1") == EntryIdentifier.by_name("-1")


class TestLookupCommands:
    """Tests for lookup subcommands."""

    def test_entry_panel(self) -> None:
        client = mock_client(json_handler(envelope(silver_moblin())))
        with patch("hyrule_compendium.cli.commands.lookup.create_client", return_value=client):
            result = runner.invoke(app, ["lookup", "entry", "112"])

        assert result.exit_code == 0
        assert "silver moblin" in result.stdout
        assert "monsters" in result.stdout

    def test_entry_json(self) -> None:
        client = mock_client(json_handler(envelope(winterwing_butterfly())))
        with patch("hyrule_compendium.cli.commands.lookup.create_client", return_value=client):
            result = runner.invoke(app, ["--json", "lookup", "entry", "winterwing butterfly"])

        assert result.exit_code == 0
        assert '"id": 67' in result.stdout
        assert '"cooking_effect": "heat resistance"' in result.stdout
        assert '"category": "creatures"' in result.stdout

    def test_entry_markup_is_escaped(self) -> None:
        """Test bracketed text from the API is shown literally."""
        payload = silver_moblin() | {
            "name": "[red]moblin",
            "common_locations": ["[bold]Hyrule Field"],
        }
        client = mock_client(json_handler(envelope(payload)))
        with patch("hyrule_compendium.cli.commands.lookup.create_client", return_value=client):
            result = runner.invoke(app, ["lookup", "entry", "112"])

        assert result.exit_code == 0
        assert "[red]moblin" in result.stdout
        assert "[bold]Hyrule Field" in result.stdout

    def test_entry_not_found(self) -> None:
        client = mock_client(json_handler({"data": {}}, 404))
        with patch("hyrule_compendium.cli.commands.lookup.create_client", return_value=client):
            result = runner.invoke(app, ["lookup", "entry", "example monster"])

        assert result.exit_code == 1
        assert "no data found" in result.stdout.lower()

    def test_monster_master_mode_path(self) -> None:
        captured: list[httpx.Request] = []
        client = mock_client(json_handler(envelope(silver_moblin()), captured=captured))
        with patch("hyrule_compendium.cli.commands.lookup.create_client", return_value=client):
            result = runner.invoke(app, ["lookup", "monster", "112", "--master-mode"])

        assert result.exit_code == 0
        assert captured[0].url.path == "/api/v2/master_mode/entry/112"

    def test_category_table(self) -> None:
        client = mock_client(json_handler(envelope([treasure_chest()])))
        with patch("hyrule_compendium.cli.commands.lookup.create_client", return_value=client):
            result = runner.invoke(app, ["lookup", "category", "treasure"])

        assert result.exit_code == 0
        assert "treasure chest" in result.stdout

    def test_creature_category_tables(self) -> None:
        payload = {"food": [hyrule_bass()], "non_food": [winterwing_butterfly()]}
        client = mock_client(json_handler(envelope(payload)))
        with patch("hyrule_compendium.cli.commands.lookup.create_client", return_value=client):
            result = runner.invoke(app, ["lookup", "category", "creatures"])

        assert result.exit_code == 0
        assert "hyrule bass" in result.stdout
        assert "non-food" in result.stdout

    def test_unknown_category(self) -> None:
        result = runner.invoke(app, ["lookup", "category", "dragons"])
        assert result.exit_code == 1
        assert "Unknown category" in result.stdout

    def test_all_summary(self) -> None:
        payload = {
            "creatures": {"food": [hyrule_bass()], "non_food": []},
            "equipment": [master_sword()],
            "materials": [apple()],
            "monsters": [silver_moblin()],
            "treasure": [],
        }
        client = mock_client(json_handler(envelope(payload)))
        with patch("hyrule_compendium.cli.commands.lookup.create_client", return_value=client):
            result = runner.invoke(app, ["lookup", "all"])

        assert result.exit_code == 0
        assert "total" in result.stdout
        assert "4" in result.stdout

    def test_all_server_error(self) -> None:
        client = mock_client(json_handler({}, 503))
        with patch("hyrule_compendium.cli.commands.lookup.create_client", return_value=client):
            result = runner.invoke(app, ["lookup", "all", "--master-mode"])

        assert result.exit_code == 1
        assert "server" in result.stdout.lower()


class TestConfigCommands:
    """Tests for config subcommands."""

    def test_generate_and_validate(self, tmp_path: Path) -> None:
        output = tmp_path / "compendium.yaml"

        result = runner.invoke(app, ["config", "generate", str(output)])
        assert result.exit_code == 0
        assert output.exists()

        result = runner.invoke(app, ["config", "validate", str(output)])
        assert result.exit_code == 0
        assert "valid" in result.stdout

    def test_generate_refuses_overwrite(self, tmp_path: Path) -> None:
        output = tmp_path / "compendium.yaml"
        output.write_text("base_url: http://localhost/\n")

        result = runner.invoke(app, ["config", "generate", str(output)])
        assert result.exit_code == 1
        assert "already exists" in result.stdout

    def test_validate_rejects_bad_url(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("base_url: nonsense\n")

        result = runner.invoke(app, ["config", "validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout

    def test_show_merges_file_env_and_flag(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "compendium.yaml"
        CompendiumConfig(base_url="http://file.test/").to_yaml(str(path))
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")

        result = runner.invoke(
            app,
            ["--config", str(path), "--base-url", "http://flag.test/", "config", "show"],
        )

        assert result.exit_code == 0
        assert "http://flag.test/" in result.stdout
        assert "INFO" in result.stdout
