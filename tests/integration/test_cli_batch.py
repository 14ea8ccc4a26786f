import json
import os
import subprocess
import sys


def _run(*args: str) -> tuple[int, dict]:
    p = subprocess.run([sys.executable, "-m", "fanyi.cli", *args], env=os.environ.copy(), capture_output=True, text=True)
    return p.returncode, json.loads(p.stdout)


def _write_answers(path):
    path.write_text(
        "reference,candidate\n"
        "I eat rice today,today I eat rice\n"
        "He likes apples,She likes apples\n"
        "My father drinks tea,xyz\n",
        encoding="utf-8",
    )


def test_batch_assesses_every_row(tmp_path):
    answers = tmp_path / "answers.csv"
    _write_answers(answers)
    code, out = _run("batch", "--in", str(answers), "--json")
    assert code == 0
    assert out["data"]["count"] == 3
    assert out["truncated"] is False
    results = out["data"]["results"]
    assert results[1]["reference"] == "He likes apples"
    assert results[1]["feedback"] == "correct"
    assert results[2]["score"] == 0.0
    assert results[2]["shortcut"] == "short"


def test_batch_limit_truncates(tmp_path):
    answers = tmp_path / "answers.csv"
    _write_answers(answers)
    code, out = _run("batch", "--in", str(answers), "--limit", "2")
    assert code == 0
    assert out["data"]["count"] == 2
    assert out["truncated"] is True
    assert out["limits"] == {"limit": 2}


def test_batch_missing_file(tmp_path):
    code, out = _run("batch", "--in", str(tmp_path / "missing.csv"))
    assert code == 1
    assert out["error"]["type"] == "NOT_FOUND"


def test_batch_bad_header(tmp_path):
    answers = tmp_path / "answers.csv"
    answers.write_text("question,answer\na,b\n", encoding="utf-8")
    code, out = _run("batch", "--in", str(answers))
    assert code == 1
    assert out["error"]["type"] == "INVALID_ARGUMENT"
