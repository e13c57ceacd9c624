"""Integration tests for end-to-end CLI workflows."""

from ledgerview.cli.main import cli


def _invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_full_workflow(cli_runner, temp_db, fixtures_dir):
    """Test complete workflow: import → accounts → months → view → delete."""
    # Step 1: Import both exports
    result = _invoke(cli_runner, temp_db, "import", str(fixtures_dir / "primary_202405.json"))
    assert result.exit_code == 0
    assert "Imported: 4 records" in result.output
    assert "Months: 202405" in result.output

    result = _invoke(cli_runner, temp_db, "import", str(fixtures_dir / "mixed_items.json"))
    assert result.exit_code == 0
    assert "Imported: 3 records" in result.output
    assert "Errors: 2" in result.output

    # Step 2: Accounts and months
    result = _invoke(cli_runner, temp_db, "accounts")
    assert result.exit_code == 0
    assert "100000001" in result.output

    result = _invoke(cli_runner, temp_db, "months", "--account", "100000001")
    assert result.exit_code == 0
    assert result.output.split() == ["2024-06", "2024-05"]

    # Step 3: View everything of the primary type
    result = _invoke(cli_runner, temp_db, "view", "--account", "100000001")
    assert result.exit_code == 0
    assert "Years       [all] 2024" in result.output
    assert "Months      [all] 06 05" in result.output
    assert "Records: 6" in result.output
    assert "Total: +355" in result.output

    # Step 4: Narrow down to May daily training
    result = _invoke(
        cli_runner,
        temp_db,
        "view",
        "--account",
        "100000001",
        "--year",
        "2024",
        "--month",
        "5",
        "--category",
        "Daily Training",
    )
    assert result.exit_code == 0
    assert "Months      all 06 [05]" in result.output
    assert "Records: 2" in result.output
    assert "Total: +120" in result.output

    # Step 5: Pass records
    result = _invoke(cli_runner, temp_db, "view", "--account", "100000001", "--type", "pass")
    assert result.exit_code == 0
    assert "Type: pass" in result.output
    assert "Total: +2" in result.output

    # Step 6: Delete a month
    result = _invoke(
        cli_runner, temp_db, "delete", "--account", "100000001", "--month", "202405", "--yes"
    )
    assert result.exit_code == 0
    assert "Deleted 4 records." in result.output

    result = _invoke(cli_runner, temp_db, "view", "--account", "100000001")
    assert "Records: 2" in result.output
    assert "Total: +95" in result.output


def test_view_warns_about_unavailable_filters(cli_runner, temp_db, fixtures_dir):
    _invoke(cli_runner, temp_db, "import", str(fixtures_dir / "primary_202405.json"))

    result = _invoke(
        cli_runner,
        temp_db,
        "view",
        "--account",
        "100000001",
        "--year",
        "2023",
        "--category",
        "Mail",
    )

    assert result.exit_code == 0
    assert "Warning: year '2023' is not available" in result.output
    assert "Categories  all Daily Training [Mail] Warp" in result.output
    assert "Total: +300" in result.output


def test_view_by_category(cli_runner, temp_db, fixtures_dir):
    _invoke(cli_runner, temp_db, "import", str(fixtures_dir / "primary_202405.json"))

    result = _invoke(
        cli_runner, temp_db, "view", "--account", "100000001", "--by-category", "--verbose"
    )

    assert result.exit_code == 0
    assert "By category:" in result.output
    assert "gacha" in result.output
    lines = [line for line in result.output.splitlines() if line.startswith("Daily Training")]
    assert lines and lines[0].split()[-2:] == ["2", "+120"]


def test_view_empty_account(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "view", "--account", "42")

    assert result.exit_code == 0
    assert "Years       [all]" in result.output
    assert "No records found." in result.output


def test_add_and_view(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        "add",
        "--account",
        "7",
        "--type",
        "pass",
        "--time",
        "2024-02-03 10:00:00",
        "--amount",
        "-1",
        "--category",
        "Warp",
    )
    assert result.exit_code == 0
    assert "Added pass record 1: 2024-02-03 10:00:00 -1" in result.output

    result = _invoke(cli_runner, temp_db, "view", "--account", "7", "--type", "pass")
    assert "Total: -1" in result.output


def test_add_invalid_amount(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        "add",
        "--account",
        "7",
        "--time",
        "2024-02-03",
        "--amount",
        "ten",
    )
    assert result.exit_code == 1
    assert "Error: Could not parse amount" in result.output


def test_import_invalid_json(cli_runner, temp_db, fixtures_dir):
    result = _invoke(cli_runner, temp_db, "import", str(fixtures_dir / "broken.json"))

    assert result.exit_code == 1
    assert "Error: Invalid JSON" in result.output


def test_delete_missing_month(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, "delete", "--account", "7", "--month", "202401", "--yes"
    )

    assert result.exit_code == 1
    assert "No records stored" in result.output


def test_delete_requires_confirmation(cli_runner, temp_db, fixtures_dir):
    _invoke(cli_runner, temp_db, "import", str(fixtures_dir / "primary_202405.json"))

    result = _invoke(
        cli_runner,
        temp_db,
        "delete",
        "--account",
        "100000001",
        "--month",
        "202405",
        input="n\n",
    )

    assert result.exit_code == 1
    result = _invoke(cli_runner, temp_db, "months", "--account", "100000001")
    assert "2024-05" in result.output


def test_invalid_log_level(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "--log-level", "chatty", "accounts")

    assert result.exit_code == 2
    assert "Unknown log level" in result.output
