"""
CLI tests.

Run with: pytest tests/test_main.py -v
"""
import json

import pytest

import config
import main


@pytest.fixture
def export_path(tmp_path, interview_payload):
    path = tmp_path / "interview_1.json"
    path.write_text(json.dumps(interview_payload), encoding="utf-8")
    return path


def test_report(export_path, capsys):
    main.main([str(export_path)])
    out = capsys.readouterr().out

    assert "INTERVIEW SUMMARY - Sam Lee" in out
    assert "Average Rating: 3.3/5 (3 rated)" in out
    assert "    - Needs improvement in Binary search - recursion and dynamic programming" in out
    assert out.index("Algorithms") < out.index("JavaScript") < out.index("General")
    assert "Solid overall." in out


def test_json_output(export_path, capsys):
    main.main([str(export_path), "--json"])
    summary = json.loads(capsys.readouterr().out)

    assert summary["stats"]["skipped"] == 1
    assert [s["section_title"] for s in summary["sections"]] == ["Algorithms", "JavaScript", "General"]


def test_section_filter(export_path, capsys):
    main.main([str(export_path), "--section", "JavaScript", "--json"])
    summary = json.loads(capsys.readouterr().out)

    assert [s["section_title"] for s in summary["sections"]] == ["JavaScript"]


def test_unknown_section_exits(export_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main.main([str(export_path), "--section", "Databases"])
    assert exc.value.code == 1
    assert "section not found" in capsys.readouterr().err


def test_missing_export_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main.main([str(tmp_path / "missing.json")])
    assert exc.value.code == 1
    assert "not found" in capsys.readouterr().err


def test_list_exports(tmp_path, monkeypatch, capsys):
    (tmp_path / "interview_7.json").write_text("{}", encoding="utf-8")
    monkeypatch.setattr(config, "EXPORTS_DIR", tmp_path)

    main.main(["--list"])
    assert "  - interview_7" in capsys.readouterr().out


def test_export_argument_required():
    with pytest.raises(SystemExit) as exc:
        main.main([])
    assert exc.value.code == 2


@pytest.mark.parametrize("raw, expected", [("4", 4), (" 8 ", 8), ("four", 0), ("", 0), (None, 0)])
def test_parse_workers(raw, expected):
    assert config.parse_workers(raw) == expected


def test_non_integer_worker_count_is_a_configuration_error(export_path, monkeypatch, capsys):
    monkeypatch.setattr(config, "SUMMARY_WORKERS_RAW", "four")
    monkeypatch.setattr(config, "SUMMARY_WORKERS", config.parse_workers("four"))

    with pytest.raises(SystemExit) as exc:
        main.main([str(export_path)])
    assert exc.value.code == 1
    assert "Configuration error" in capsys.readouterr().err


def test_unknown_status_is_reported(export_path, interview_payload, capsys):
    interview_payload["status"] = "cancelled"
    export_path.write_text(json.dumps(interview_payload), encoding="utf-8")

    main.main([str(export_path)])
    assert "Status: cancelled" in capsys.readouterr().out
