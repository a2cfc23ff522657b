from __future__ import annotations

import subprocess
import sys
from pathlib import Path

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "tools" / "depcheck.py"


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, str(SCRIPT_PATH), *args],
        capture_output=True,
        text=True,
        check=False,
    )


def test_depcheck_fails_on_forbidden_import(tmp_path: Path) -> None:
    domain_dir = tmp_path / "domain"
    domain_dir.mkdir(parents=True, exist_ok=True)

    violating_file = domain_dir / "model.py"
    violating_file.write_text("import sqlalchemy\n", encoding="utf-8")

    result = _run("--layer", "domain", "--path", str(domain_dir))

    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0
    assert "sqlalchemy" in combined_output
    assert str(violating_file) in combined_output


def test_depcheck_allows_pydantic_in_application(tmp_path: Path) -> None:
    dto_file = tmp_path / "dto.py"
    dto_file.write_text("from pydantic import BaseModel\n", encoding="utf-8")

    result = _run("--layer", "application", "--path", str(dto_file))

    assert result.returncode == 0
    assert "depcheck passed" in result.stdout


def test_depcheck_path_requires_layer(tmp_path: Path) -> None:
    result = _run("--path", str(tmp_path))
    assert result.returncode == 2


def test_project_layers_are_clean() -> None:
    result = _run()
    assert result.returncode == 0, result.stdout
