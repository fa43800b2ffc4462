"""End-to-end smoke tests for the CLI with file-backed inputs and no LLM."""

import json

from typer.testing import CliRunner

from gigmatch.cli.main import app

runner = CliRunner()


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_score_command(tmp_path):
    worker = _write_json(
        tmp_path / "worker.json",
        {
            "skills": ["Cooking"],
            "categories": ["Cooking"],
            "location": "Guntur, AP",
            "availability": "Part-time",
            "experience": "3 years as a home cook",
        },
    )
    job = _write_json(
        tmp_path / "job.json",
        {
            "title": "Cook",
            "required_skills": ["Cooking", "Food Preparation"],
            "category": "Cooking",
            "location": "Guntur, AP",
            "job_type": "part-time",
        },
    )

    result = runner.invoke(app, ["score", worker, job])

    assert result.exit_code == 0, result.output
    assert "80" in result.output
    assert "Why:" in result.output


def test_score_rejects_invalid_job(tmp_path):
    worker = _write_json(tmp_path / "worker.json", {"skills": ["Cooking"]})
    job = _write_json(tmp_path / "job.json", {"job_type": "weekly"})

    result = runner.invoke(app, ["score", worker, job])
    assert result.exit_code == 1


def test_scan_job_blocks_fraud():
    result = runner.invoke(
        app, ["scan-job", "Data entry", "Pay a registration fee. Guaranteed income!"]
    )

    assert result.exit_code == 1
    assert "registration fee" in result.output
    assert "Posting blocked" in result.output


def test_scan_job_allows_clean_posting():
    result = runner.invoke(app, ["scan-job", "Cook", "Daily lunch for a family of four"])

    assert result.exit_code == 0
    assert "Posting allowed" in result.output


def test_check_message_masks_phone():
    result = runner.invoke(app, ["check-message", "call me at 9876543210"])

    assert result.exit_code == 0
    assert "[phone hidden]" in result.output


def test_skills_command():
    result = runner.invoke(app, ["skills", "chowkidar"])

    assert result.exit_code == 0
    assert "Security" in result.output


def test_search_command_keyword_only(tmp_path):
    resumes = _write_json(
        tmp_path / "resumes.json",
        [
            {
                "worker_id": "w1",
                "worker_name": "Asha",
                "text": "Welder with gate fabrication work",
                "parsed": {"skills": ["Welding"]},
            },
            {
                "worker_id": "w2",
                "worker_name": "Ravi",
                "text": "Driver for delivery routes",
                "parsed": {"skills": ["Driving"]},
            },
        ],
    )

    result = runner.invoke(app, ["search", resumes, "welder", "--skill", "Welding"])

    assert result.exit_code == 0, result.output
    assert "Indexed 2" in result.output
    assert "Asha" in result.output
    assert "Ravi" not in result.output


def test_search_command_no_results(tmp_path):
    resumes = _write_json(tmp_path / "resumes.json", [])

    result = runner.invoke(app, ["search", resumes, "welder"])

    assert result.exit_code == 0
    assert "No results found" in result.output
