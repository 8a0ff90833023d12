"""Importing the app in a fresh interpreter must log the selected backend."""
import os
import subprocess
import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent.parent


def test_backend_selection_is_logged_on_import():
    env = {**os.environ, "MUSEUM_STORAGE": "memory", "PYTHONPATH": str(BACKEND_DIR)}

    result = subprocess.run(
        [sys.executable, "-c", "import app.main"],
        cwd=BACKEND_DIR,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )

    assert result.returncode == 0, result.stderr
    assert "[deps] Database backend: memory" in result.stderr
    assert "[deps] Reporting timezone:" in result.stderr
