# pytest configuration hooks.
#
# Policy: No skipped tests. Skips hide real problems.
# If something cannot run in this environment, use xfail with a clear reason (and fix it later).

from __future__ import annotations

import os
from pathlib import Path
import pytest

# Register pytest-bdd step definitions as a pytest plugin so fixtures are discoverable.
pytest_plugins = ["tests.bdd.steps"]

_SKIP_COUNT = 0
_REPO_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure() -> None:
    # A developer's own config must never change test results.
    if "FANYI_CONFIG_PATH" not in os.environ:
        os.environ["FANYI_CONFIG_PATH"] = str(_REPO_ROOT / ".fanyi-test-config.toml")
    os.environ.pop("FANYI_STRICTNESS", None)
    # CLI tests spawn `python -m fanyi.cli`; make the source tree importable there too.
    src = str(_REPO_ROOT / "src")
    existing = os.environ.get("PYTHONPATH")
    os.environ["PYTHONPATH"] = f"{src}{os.pathsep}{existing}" if existing else src


def pytest_runtest_logreport(report: pytest.TestReport) -> None:
    global _SKIP_COUNT
    if report.when == "setup" and report.outcome == "skipped":
        _SKIP_COUNT += 1


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    if _SKIP_COUNT > 0:
        pytest.exit(f"Skipped tests are not allowed (skipped={_SKIP_COUNT}).", returncode=2)
