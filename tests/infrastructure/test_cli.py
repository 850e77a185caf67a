"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from carconfig.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("CARCONFIG_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("CARCONFIG_CATALOG", raising=False)
    return CliRunner()


def _saved_ids(tmp_path) -> list[str]:
    raw = json.loads((tmp_path / "saved_configurations.json").read_text(encoding="utf-8"))
    return [item["id"] for item in raw]


class TestCatalogCommands:

    def test_list_all(self, runner):
        result = runner.invoke(cli, ["catalog", "list"])
        assert result.exit_code == 0
        assert "winch-mount" in result.output
        assert "₹20,00,000" in result.output

    def test_list_one_category(self, runner):
        result = runner.invoke(cli, ["catalog", "list", "--category", "roofs"])
        assert result.exit_code == 0
        assert "convertible" in result.output
        assert "winch-mount" not in result.output

    def test_unknown_category(self, runner):
        result = runner.invoke(cli, ["catalog", "list", "--category", "spoilers"])
        assert result.exit_code != 0
        assert "Unknown category 'spoilers'" in result.output


class TestConfigCommands:

    def test_show_default(self, runner):
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "AX (Standard)" in result.output
        assert "₹15,00,000" in result.output
        assert "Configuration is valid." in result.output

    def test_changes_persist_between_invocations(self, runner, tmp_path):
        assert runner.invoke(cli, ["config", "variant", "x"]).exit_code == 0
        assert runner.invoke(cli, ["config", "addon", "winch-mount"]).exit_code == 0

        result = runner.invoke(cli, ["config", "show"])

        assert "X (Off-Road)" in result.output
        assert "Winch Mount" in result.output
        assert (tmp_path / "session.json").exists()

    def test_variant_change_repairs_add_ons(self, runner):
        runner.invoke(cli, ["config", "variant", "x"])
        runner.invoke(cli, ["config", "addon", "winch-mount"])
        result = runner.invoke(cli, ["config", "variant", "ax"])
        assert result.exit_code == 0
        assert "Total: ₹15,00,000" in result.output
        assert "Configuration is valid." in result.output

    def test_validation_errors_are_printed(self, runner):
        result = runner.invoke(cli, ["config", "addon", "snorkel-kit"])
        assert result.exit_code == 0
        assert "ERROR    Snorkel kit is only available on X variant" in result.output

    def test_unknown_option_id(self, runner):
        result = runner.invoke(cli, ["config", "color", "hot-pink"])
        assert result.exit_code != 0
        assert "Color 'hot-pink' not found" in result.output

    def test_plate_length_enforced_by_cli(self, runner):
        result = runner.invoke(cli, ["config", "plate", "ABCDEFGHIJK"])
        assert result.exit_code != 0
        assert "limited to 10 characters" in result.output

    def test_plate_and_reset(self, runner):
        result = runner.invoke(cli, ["config", "plate", "THAR"])
        assert "Total: ₹15,05,000" in result.output
        result = runner.invoke(cli, ["config", "reset"])
        assert "Total: ₹15,00,000" in result.output


class TestSavedCommands:

    def test_save_list_and_load(self, runner, tmp_path):
        runner.invoke(cli, ["config", "variant", "lx"])
        result = runner.invoke(cli, ["saved", "save"])
        assert result.exit_code == 0
        [config_id] = _saved_ids(tmp_path)

        runner.invoke(cli, ["config", "reset"])
        listing = runner.invoke(cli, ["saved", "list"])
        assert config_id in listing.output
        assert "LX (Luxury)" in listing.output

        loaded = runner.invoke(cli, ["saved", "load", "--id", config_id])
        assert loaded.exit_code == 0
        assert "LX (Luxury)" in loaded.output
        assert "₹18,00,000" in loaded.output

    def test_load_unknown_id_is_not_an_error(self, runner):
        result = runner.invoke(cli, ["saved", "load", "--id", "missing"])
        assert result.exit_code == 0
        assert "nothing loaded" in result.output

    def test_history_survives_between_invocations(self, runner):
        runner.invoke(cli, ["saved", "save"])
        runner.invoke(cli, ["saved", "save"])
        result = runner.invoke(cli, ["saved", "history"])
        assert result.output.count("AX (Standard)") == 2

    def test_delete(self, runner, tmp_path):
        runner.invoke(cli, ["saved", "save"])
        [config_id] = _saved_ids(tmp_path)
        result = runner.invoke(cli, ["saved", "delete", "--id", config_id])
        assert "deleted" in result.output
        assert _saved_ids(tmp_path) == []
        again = runner.invoke(cli, ["saved", "delete", "--id", config_id])
        assert again.exit_code == 0
        assert "No saved configuration" in again.output

    def test_compare_two_saved(self, runner, tmp_path):
        runner.invoke(cli, ["saved", "save"])
        runner.invoke(cli, ["config", "variant", "x"])
        runner.invoke(cli, ["saved", "save"])
        first, second = _saved_ids(tmp_path)

        result = runner.invoke(cli, ["saved", "compare", "--id", second, "--id", first])

        assert result.exit_code == 0
        assert "costs ₹5,00,000 more" in result.output
        assert "Differs in: variant" in result.output

    def test_compare_with_current(self, runner, tmp_path):
        runner.invoke(cli, ["saved", "save"])
        [config_id] = _saved_ids(tmp_path)
        result = runner.invoke(cli, ["saved", "compare", "--id", config_id])
        assert "cost the same" in result.output
        assert "Differs in: nothing" in result.output

    def test_compare_unknown_id(self, runner):
        result = runner.invoke(cli, ["saved", "compare", "--id", "missing"])
        assert result.exit_code != 0
        assert "not found" in result.output
