from __future__ import annotations

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SCRIPT = ROOT / "scripts" / "accessor_check.py"


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        cwd=ROOT,
        capture_output=True,
        text=True,
        check=False,
    )


def test_accessor_check_passes_on_repo() -> None:
    proc = _run()
    assert proc.returncode == 0, proc.stderr
    assert "ACCESSOR_CHECK_OK" in proc.stdout


def test_accessor_check_flags_missing_strict_form(tmp_path) -> None:
    path = tmp_path / "accessors.py"
    path.write_text(
        "def get_int(name, default):\n    return default\n\n"
        "def get_string(name, default):\n    return default\n\n"
        "__all__ = ['get_int', 'get_string']\n",
        encoding="utf-8",
    )
    proc = _run(str(path))
    assert proc.returncode == 1
    assert "ACCESSOR_CHECK_FAIL: get_int has no strict form" in proc.stderr


def test_accessor_check_flags_strict_string_and_unexported(tmp_path) -> None:
    path = tmp_path / "accessors.py"
    path.write_text(
        "def get_string(name, default):\n    return default\n\n"
        "def get_string_strict(name, default):\n    return default, None\n\n"
        "__all__ = ['get_string', 'get_string_strict']\n",
        encoding="utf-8",
    )
    proc = _run(str(path))
    assert proc.returncode == 1
    assert "get_string must not have a strict form" in proc.stderr

    path.write_text(
        "def get_bool(name, default):\n    return default\n\n"
        "def get_bool_strict(name, default):\n    return default, None\n\n"
        "__all__ = ['get_bool']\n",
        encoding="utf-8",
    )
    proc = _run(str(path))
    assert proc.returncode == 1
    assert "not exported in __all__: ['get_bool_strict']" in proc.stderr
