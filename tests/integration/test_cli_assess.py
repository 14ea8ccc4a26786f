import json
import os
import subprocess
import sys


def _run(*args: str, env: dict[str, str] | None = None) -> tuple[int, dict]:
    p = subprocess.run(
        [sys.executable, "-m", "fanyi.cli", *args],
        env=env or os.environ.copy(),
        capture_output=True,
        text=True,
    )
    return p.returncode, json.loads(p.stdout)


def test_assess_correct_answer():
    code, out = _run("assess", "--reference", "He likes apples", "--candidate", "She likes apples", "--json")
    assert code == 0
    assert out["data"]["feedback"] == "correct"
    assert out["data"]["temporal_conflict"] is False
    assert out["data"]["thresholds"] == {"correct": 0.7, "partial": 0.25}


def test_assess_temporal_conflict():
    code, out = _run(
        "assess",
        "--reference",
        "I will go to school tomorrow",
        "--candidate",
        "I will go to school today",
    )
    assert code == 0
    assert out["data"]["temporal_conflict"] is True
    assert out["data"]["feedback"] == "partial"


def test_assess_threshold_overrides():
    code, out = _run(
        "assess",
        "--reference",
        "He likes apples",
        "--candidate",
        "She likes apples",
        "--correct-threshold",
        "1.0",
        "--partial-threshold",
        "0.5",
    )
    assert code == 0
    assert out["data"]["thresholds"] == {"correct": 1.0, "partial": 0.5}
    assert out["data"]["feedback"] == "partial"


def test_assess_thresholds_from_config(tmp_path):
    config = tmp_path / "config.toml"
    config.write_text("[feedback]\ncorrect = 0.99\npartial = 0.1\n", encoding="utf-8")
    env = os.environ.copy()
    env["FANYI_CONFIG_PATH"] = str(config)
    code, out = _run("assess", "--reference", "He likes apples", "--candidate", "She likes apples", env=env)
    assert code == 0
    assert out["data"]["thresholds"] == {"correct": 0.99, "partial": 0.1}


def test_assess_rejects_inverted_thresholds():
    code, out = _run(
        "assess",
        "--reference",
        "I eat rice",
        "--candidate",
        "I eat rice",
        "--correct-threshold",
        "0.2",
        "--partial-threshold",
        "0.5",
    )
    assert code == 1
    assert out["ok"] is False
    assert out["error"]["type"] == "INVALID_ARGUMENT"
