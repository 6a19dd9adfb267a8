import json
import os

from typer.testing import CliRunner

from recycling_machine.cli import app

runner = CliRunner()


def test_recycle_prints_results_and_summary():
    result = runner.invoke(
        app,
        ["--machine-id", "RCM-3", "--location", "Library", "recycle", "-i", "glass:2.0", "-i", "steel:5"],
    )
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert "glass: Item Value: $3.60" in lines
    assert "steel: Not accepted: unknown item type 'steel'" in lines
    assert lines[-1] == "RCM-3 Library $196.40  2.00 lbs"


def test_recycle_malformed_item_is_invalid_input():
    result = runner.invoke(app, ["recycle", "--item", "glass"])
    assert result.exit_code == 0
    assert "glass: Invalid Input" in result.output
    assert "RCM-1 Unknown $200.00  0.00 lbs" in result.output


def test_settings_come_from_env(monkeypatch):
    monkeypatch.setenv("RCM_MACHINE_ID", "ENV-1")
    monkeypatch.setenv("RCM_LOCATION", "Office")
    result = runner.invoke(app, ["recycle", "-i", "plastic:1"])
    assert result.exit_code == 0
    assert "ENV-1 Office $198.80  1.00 lbs" in result.output


def test_dotenv_file_in_cwd_is_loaded(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("RCM_LOCATION=School\n")
    monkeypatch.chdir(tmp_path)
    try:
        result = runner.invoke(app, ["recycle", "-i", "plastic:1"])
    finally:
        # load_dotenv writes os.environ directly
        os.environ.pop("RCM_LOCATION", None)
    assert "RCM-1 School" in result.output


def test_price_quotes_without_paying():
    result = runner.invoke(app, ["price", "Aluminium", "3"])
    assert result.exit_code == 0
    assert result.output.strip() == "$6.60"


def test_price_unknown_type_fails():
    result = runner.invoke(app, ["price", "steel", "3"])
    assert result.exit_code == 1
    assert "Unknown item type" in result.output


def test_price_invalid_weight_fails():
    result = runner.invoke(app, ["price", "glass", "heavy"])
    assert result.exit_code == 1
    assert "Invalid Input" in result.output


def test_catalog_lists_entries_from_file(tmp_path):
    p = tmp_path / "catalog.json"
    p.write_text(json.dumps({"entries": [{"type": "tin", "price_per_weight": 0.75}]}))
    result = runner.invoke(app, ["--catalog-path", str(p), "catalog"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "tin\t$0.75/lb"


def test_missing_catalog_file_reports_error(tmp_path):
    result = runner.invoke(app, ["--catalog-path", str(tmp_path / "missing.json"), "catalog"])
    assert result.exit_code == 1
    assert "Catalog file not found" in result.output


def test_run_reads_until_quit(monkeypatch):
    import recycling_machine.term_ui as term_ui

    answers = iter(["glass", "quit"])
    monkeypatch.setattr(term_ui, "prompt_item_type", lambda types, session=None: next(answers))
    monkeypatch.setattr(term_ui, "prompt_weight", lambda session=None: "1")
    result = runner.invoke(app, ["run"])
    assert result.exit_code == 0, result.output
    assert "Item Value: $1.80" in result.output


def test_huge_weight_is_reported_as_invalid_input():
    result = runner.invoke(app, ["recycle", "-i", "glass:1000000000000000000000000000"])
    assert result.exit_code == 0, result.output
    assert "glass: Invalid Input" in result.output
    assert "RCM-1 Unknown $200.00  0.00 lbs" in result.output


def test_log_level_option_controls_output():
    result = runner.invoke(app, ["--log-level", "DEBUG", "catalog"])
    assert result.exit_code == 0, result.output
    assert "catalog add type=glass" in result.output


def test_unknown_log_level_fails():
    result = runner.invoke(app, ["--log-level", "loud", "catalog"])
    assert result.exit_code == 1
    assert "unknown log level" in result.output
