import csv
import datetime as dt
import json
from pathlib import Path

import pytest
from packages.harness import run_case, run_batch, summarize, write_csv, write_manifest
from packages.harness.io import timestamp_id, git_commit_or_unknown


def test_run_case_smoke():
    r = run_case("(a+b)*c\n", line_no=3)
    assert r["valid"] is True and r["verdict"] == "correct"
    assert r["expression"] == "(a+b)*c"
    assert r["expected"] is None and r["agrees"] is None
    assert r["line_no"] == 3 and r["time_ms"] >= 0.0


def test_run_batch_with_labels():
    exprs = ["a+b", "a+", "7a", "--a"]
    labels = ["correct", "incorrect", "correct", "correct"]
    results = run_batch(exprs, expected=labels)
    assert [r["verdict"] for r in results] == ["correct", "incorrect", "incorrect", "correct"]
    s = summarize(results)
    assert s["num_cases"] == 4 and s["correct"] == 2 and s["incorrect"] == 2
    assert s["labelled"] == 4 and s["agreeing"] == 3
    assert s["mismatched_lines"] == [3]


def test_run_batch_sample_and_guardrail():
    assert len(run_batch(["a", "b", "c"], sample=2)) == 2
    with pytest.raises(ValueError):
        run_batch(["a", "b"], expected=["correct"])


def test_write_csv_and_manifest(tmp_path: Path):
    results = run_batch(["-a+b", "x"])
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["expression"] == "'-a+b"
    assert rows[1]["expression"] == "x"
    assert rows[0]["expected"] == "" and rows[0]["agrees"] == ""

    m_path = write_manifest({"run_id": timestamp_id(), "summary": summarize(results)},
                            str(tmp_path / "m.json"))
    data = json.loads(Path(m_path).read_text(encoding="utf-8"))
    assert data["summary"]["num_cases"] == 2
    assert len(data["run_id"]) == 16 and data["run_id"].endswith("Z")


def test_run_id_and_git_fallback(tmp_path: Path):
    moment = dt.datetime(2025, 8, 20, 2, 41, 21, tzinfo=dt.timezone.utc)
    assert timestamp_id(moment) == "20250820T024121Z"
    assert git_commit_or_unknown(cwd=str(tmp_path / "no-such-dir")) == "unknown"


def test_manifest_keeps_non_ascii(tmp_path: Path):
    m_path = write_manifest({"corpus": {"path": "выражения.txt"}}, str(tmp_path / "m.json"))
    text = Path(m_path).read_text(encoding="utf-8")
    assert "выражения.txt" in text
    assert json.loads(text)["corpus"]["path"] == "выражения.txt"
