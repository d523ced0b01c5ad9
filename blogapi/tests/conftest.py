from __future__ import annotations

import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="blogapi-tests-"))

# Must run before anything imports blogapi: config and the engine are built at import.
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP / 'app.db'}")
os.environ.setdefault("LOG_FILE", str(_TMP / "app.log"))
os.environ.setdefault("PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")
os.environ.setdefault("SESSION_BACKEND", "database")

import pytest  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from blogapi.infrastructure.db import Base, build_engine  # noqa: E402
from blogapi.infrastructure.db import models  # noqa: E402,F401


@pytest.fixture()
def session_factory(tmp_path: Path):
    engine = build_engine(f"sqlite:///{tmp_path / 'repo.db'}")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    yield factory
    engine.dispose()
