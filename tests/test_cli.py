import json
import textwrap

import pytest
from typer.testing import CliRunner

from cheatguard.catalog import load_catalog
from cheatguard.cli import app
from cheatguard.formatting import render_report

runner = CliRunner()


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "guards.yaml"
    path.write_text(textwrap.dedent("""\
        guards:
          partition-table:
            protects: Disk is partitioned correctly
            severity: CRITICAL
            cheats:
              - Accept exit code without verification
              - Skip partition check
            consequence: No partitions, installation fails silently
          hostname:
            protects: Hostname persists
            severity: LOW
            cheats: [Read the live hostname]
            consequence: Default hostname after reboot
    """))
    return path


def test_validate_reports_guard_count(catalog_file):
    result = runner.invoke(app, ["validate", str(catalog_file)])
    assert result.exit_code == 0
    assert "2 guard(s) OK" in result.output


def test_validate_missing_catalog():
    result = runner.invoke(app, ["validate", "nonexistent.yaml"])
    assert result.exit_code != 0


def test_validate_invalid_catalog(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("guards: {}\n")
    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1
    assert "guards must not be empty" in result.output


def test_show_renders_report(catalog_file):
    result = runner.invoke(
        app,
        ["show", str(catalog_file), "partition-table", "-m", "Partition vda1 not found"],
    )
    assert result.exit_code == 0
    metadata = load_catalog(catalog_file).get("partition-table")
    assert result.output == render_report("Partition vda1 not found", metadata)


def test_show_unknown_guard(catalog_file):
    result = runner.invoke(app, ["show", str(catalog_file), "bootloader"])
    assert result.exit_code == 1
    assert "Unknown guard 'bootloader'" in result.output


def test_schema_writes_json_schema(tmp_path):
    out = tmp_path / "nested" / "schema.json"
    result = runner.invoke(app, ["schema", "--out", str(out)])
    assert result.exit_code == 0
    schema = json.loads(out.read_text())
    assert "guards" in schema["properties"]
    assert "AssertionMetadata" in schema["$defs"]
    assert set(schema["$defs"]["AssertionMetadata"]["required"]) == {
        "protects",
        "severity",
        "cheats",
        "consequence",
    }


def test_log_file_option_creates_log(tmp_path, catalog_file):
    log_file = tmp_path / "logs" / "debug.log"
    result = runner.invoke(
        app, ["--log-file", str(log_file), "validate", str(catalog_file)]
    )
    assert result.exit_code == 0
    assert log_file.exists()


def test_validate_directory_reports_error(tmp_path):
    result = runner.invoke(app, ["validate", str(tmp_path)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not isinstance(result.exception, IsADirectoryError)
