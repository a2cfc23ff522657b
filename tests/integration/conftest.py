from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Iterator

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from dinereg.infrastructure.db import session as db_session

BACKEND_DIR = Path(__file__).resolve().parents[2]


@pytest.fixture(scope="session", autouse=True)
def integration_environment(tmp_path_factory: pytest.TempPathFactory) -> Iterator[None]:
    database_path = tmp_path_factory.mktemp("db") / "dinereg.sqlite3"
    database_url = os.getenv("TEST_DATABASE_URL", f"sqlite:///{database_path}")

    os.environ["DATABASE_URL"] = database_url
    os.environ.setdefault("OTEL_SERVICE_NAME", "dinereg-backend-test")
    os.environ.setdefault("OTEL_EXPORTER_OTLP_ENDPOINT", "")

    db_session._build_engine.cache_clear()

    env = os.environ.copy()
    env["PYTHONPATH"] = f"{BACKEND_DIR / 'src'}{os.pathsep}{env.get('PYTHONPATH', '')}".rstrip(
        os.pathsep
    )

    subprocess.run(
        [sys.executable, "-m", "alembic", "-c", "alembic.ini", "upgrade", "head"],
        cwd=BACKEND_DIR,
        env=env,
        check=True,
    )
    subprocess.run(
        [sys.executable, "-m", "dinereg.tools.seed"],
        cwd=BACKEND_DIR,
        env=env,
        check=True,
    )

    yield
    db_session._build_engine.cache_clear()
