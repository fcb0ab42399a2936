"""Run each example script and compare its stdout with the inline ``# =>`` comments."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLES_ROOT = REPO_ROOT / "examples"
SRC_ROOT = REPO_ROOT / "src"

EXAMPLE_SCRIPTS = [
    "ex_01_quickstart/01_quickstart.py",
    "ex_02_immutable_aliases/01_immutable_aliases.py",
    "ex_03_deferred_dependencies/01_deferred_dependencies.py",
    "ex_04_lock_modes/01_lock_modes.py",
    "ex_05_errors/01_errors.py",
]


def _expected_stdout(path: Path) -> list[str]:
    return [
        line.split("# =>", maxsplit=1)[1].strip()
        for line in path.read_text(encoding="utf-8").splitlines()
        if "print(" in line and "# =>" in line
    ]


def test_every_example_is_listed() -> None:
    found = sorted(str(path.relative_to(EXAMPLES_ROOT)) for path in EXAMPLES_ROOT.glob("ex_*/*.py"))

    assert found == sorted(EXAMPLE_SCRIPTS)


@pytest.mark.parametrize("script", EXAMPLE_SCRIPTS)
def test_example_output(script: str) -> None:
    path = EXAMPLES_ROOT / script
    env = {**os.environ, "PYTHONPATH": str(SRC_ROOT)}

    completed = subprocess.run(  # noqa: S603
        [sys.executable, str(path)],
        cwd=path.parent,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode == 0, completed.stderr
    assert completed.stderr == ""
    assert completed.stdout.splitlines() == _expected_stdout(path)
