"""Smoke tests for the command line interface."""

import json

import pytest

from job_screener.cli import main


@pytest.fixture
def run(tmp_path, capsys):
    """Run the CLI with an isolated config file and return stdout."""
    config_path = str(tmp_path / "config.json")

    def _run(*args):
        main(["--config", config_path, *args])
        return capsys.readouterr().out
    return _run


def test_scan_reports_gaps(run, tmp_path, write_json):
    posting = tmp_path / "posting.txt"
    posting.write_text("US Citizenship required", encoding="utf-8")
    profile = write_json("profile.json", {"workAuthorization": "visa"})

    output = run("scan", "--job", str(posting), "--profile", str(profile))

    assert "[RISK] US Citizenship required - Visa holder" in output


def test_scan_json_output(run, tmp_path, write_json):
    posting = tmp_path / "posting.txt"
    posting.write_text("Must have active TS/SCI clearance", encoding="utf-8")
    profile = write_json("profile.json", {"security_clearance": "secret"})

    output = run("scan", "--job", str(posting), "--profile", str(profile), "--json")

    gaps = json.loads(output)
    assert gaps == [{
        "kind": "security_clearance",
        "label": "Security Clearance",
        "requirement_text": "TS/SCI",
        "status": "risk",
        "candidate_value": "secret",
    }]


def test_classify(run):
    assert run("classify", "Why are you interested in joining our team?").strip() == "why_interested"
    assert run("classify", "What color is your favorite fruit?").strip() == "uncategorized"


def test_bank_workflow(run, tmp_path, write_json):
    """Seed a bank, answer from it, then save a custom answer."""
    bank_path = str(tmp_path / "bank.json")
    summary = write_json("summary.json", {"title": "Engineer", "years_experience": 5, "skills": ["Python"]})

    run("init-bank", "--summary", str(summary), "--bank", bank_path)
    answer = run("answer", "Why are you interested in this role?", "--company", "Acme", "--bank", bank_path)
    assert "Acme" in answer

    run("save-answer", "Are you willing to travel?", "Yes, up to 25%.", "--bank", bank_path)
    assert run("answer", "Are you willing to travel?", "--bank", bank_path).strip() == "Yes, up to 25%."

    stored = json.loads((tmp_path / "bank.json").read_text())
    assert stored["custom_answers"]["willing.*travel"] == "Yes, up to 25%."


def test_init_bank_keeps_existing(run, tmp_path, write_json):
    bank = write_json("bank.json", {"custom_answers": {"travel": "Yes."}})
    summary = write_json("summary.json", {"title": "Engineer"})

    output = run("init-bank", "--summary", str(summary), "--bank", str(bank))

    assert "already exists" in output
    assert json.loads(bank.read_text()) == {"custom_answers": {"travel": "Yes."}}


def test_missing_file_exits(run, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        run("scan", "--job", str(tmp_path / "missing.txt"))

    assert exc_info.value.code == 1


def test_malformed_profile_exits(run, tmp_path, write_json, capsys):
    posting = tmp_path / "posting.txt"
    posting.write_text("US Citizenship required", encoding="utf-8")
    profile = write_json("profile.json", ["citizen"])

    with pytest.raises(SystemExit) as exc_info:
        run("scan", "--job", str(posting), "--profile", str(profile))

    assert exc_info.value.code == 1
    assert "must be a JSON object" in capsys.readouterr().out


def test_no_command_exits(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(tmp_path / "config.json")])

    assert exc_info.value.code == 1
