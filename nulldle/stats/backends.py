"""
Durable key-value backends for statistics.

Contract (all backends):
  - read()          -> dict of key -> int (empty when nothing stored yet)
  - write(values)   -> replace the stored values in ONE transaction
  - any I/O problem or unreadable data raises StorageUnavailable

Backends are not thread-safe on their own; StatsStore serializes access.

  memory://            MemoryBackend   (tests, throwaway sessions)
  sqlite:///stats.db   SqlBackend      (any SQLAlchemy URL)
  anything else        JsonFileBackend (path to a .json file)
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Mapping

from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from nulldle.engine.errors import GameError


class StorageUnavailable(GameError):
    message = "Statistics could not be saved"


class KeyValueBackend:
    """Base class; subclasses override read() and write()."""

    def read(self) -> Dict[str, int]:
        raise NotImplementedError("Override in subclass")

    def write(self, values: Mapping[str, int]) -> None:
        raise NotImplementedError("Override in subclass")


class MemoryBackend(KeyValueBackend):
    def __init__(self, initial: Mapping[str, int] | None = None):
        self._values: Dict[str, int] = dict(initial or {})

    def read(self) -> Dict[str, int]:
        return dict(self._values)

    def write(self, values: Mapping[str, int]) -> None:
        self._values = dict(values)


class JsonFileBackend(KeyValueBackend):
    """
    One JSON object per file: {"games_played": 3, ...}.

    Writes go to a temp file in the same directory and are moved into place
    with os.replace, so a crash never leaves a half-written file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def read(self) -> Dict[str, int]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageUnavailable(f"cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageUnavailable(f"corrupt stats file {self.path}: expected an object")
        for k, v in data.items():
            # bool is an int subclass; reject it too
            if not isinstance(v, int) or isinstance(v, bool) or v < 0:
                raise StorageUnavailable(f"corrupt stats file {self.path}: bad value for {k!r}")
        return data

    def write(self, values: Mapping[str, int]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".stats-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(dict(values), f, indent=2, sort_keys=True)
                os.replace(tmp, self.path)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except OSError as e:
            raise StorageUnavailable(f"cannot write {self.path}: {e}") from e


Base = declarative_base()


class StatEntry(Base):
    """One counter per row."""
    __tablename__ = "stats"

    key = Column(String(64), primary_key=True)
    value = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<StatEntry(key='{self.key}', value={self.value})>"


class SqlBackend(KeyValueBackend):
    """SQLAlchemy-backed store (SQLite by default)."""

    def __init__(self, url: str = "sqlite:///nulldle_stats.db"):
        self.url = url
        try:
            self.engine = create_engine(url, echo=False)
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"cannot open {url}: {e}") from e
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False)

    def read(self) -> Dict[str, int]:
        try:
            with self.SessionLocal() as db:
                return {row.key: int(row.value) for row in db.query(StatEntry).all()}
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"cannot read {self.url}: {e}") from e

    def write(self, values: Mapping[str, int]) -> None:
        try:
            # begin(): commit on success, roll back on any error
            with self.SessionLocal.begin() as db:
                for key, value in values.items():
                    db.merge(StatEntry(key=key, value=int(value)))
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"cannot write {self.url}: {e}") from e

    def dispose(self) -> None:
        self.engine.dispose()


def open_backend(url: str) -> KeyValueBackend:
    """Pick a backend from a URL or path (see module docstring)."""
    if url == "memory://":
        return MemoryBackend()
    if "://" in url:
        return SqlBackend(url)
    return JsonFileBackend(url)
