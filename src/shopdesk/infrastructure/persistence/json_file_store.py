"""Shared plumbing for the JSON-file-backed repositories.

Each repository owns one file holding a JSON list of records.  Writes go
to a temporary file in the same directory and are moved into place with
``os.replace``, so a reader sees either the previous document or the new
one.  A read-modify-write cycle holds an exclusive lock on the sidecar
``<file>.lock``, which serialises writers across threads and processes
sharing the data directory.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from filelock import FileLock, Timeout

from shopdesk.domain.exceptions import DomainException

LOCK_TIMEOUT_SECONDS = 10.0


class StoreError(Exception):
    """The backing store could not be read or written."""


_PATH_LOCKS: dict[Path, threading.RLock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _PATH_LOCKS_GUARD:
        return _PATH_LOCKS.setdefault(path, threading.RLock())


class JsonFileStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path).resolve()
        self._lock = _lock_for(self._file_path)
        self._file_lock = FileLock(
            str(self._file_path) + ".lock", timeout=LOCK_TIMEOUT_SECONDS
        )
        self._ensure_file()

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(records, list) or not all(
            isinstance(raw, dict) and "id" in raw for raw in records
        ):
            raise StoreError(f"Malformed document in {self._file_path}")
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        directory = self._file_path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self._file_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(json.dumps(records, indent=2) + "\n")
                os.replace(tmp_name, self._file_path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise StoreError(f"Cannot write {self._file_path}: {exc}") from exc

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        with self._lock:
            try:
                self._file_lock.acquire()
            except Timeout as exc:
                raise StoreError(f"Timed out waiting for {self._file_lock.lock_file}") from exc
            try:
                yield
            finally:
                self._file_lock.release()

    @contextmanager
    def _transaction(self) -> Iterator[list[dict]]:
        """Yield the records; persist them if the block finishes cleanly.

        The load and the replace happen under one exclusive lock, so no
        other writer can slip in between.
        """
        with self._exclusive():
            records = self._load_raw()
            yield records
            self._persist_raw(records)

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"Cannot create {self._file_path.parent}: {exc}") from exc
        with self._exclusive():
            if not self._file_path.exists():
                self._persist_raw([])

    def _decode(self, raw: dict) -> Any:
        """Map a stored record to its aggregate; bad records are store errors."""
        try:
            return self._to_domain(raw)
        except (ArithmeticError, KeyError, TypeError, ValueError, DomainException) as exc:
            raise StoreError(
                f"Malformed record {raw.get('id')!r} in {self._file_path}: {exc!r}"
            ) from exc

    @staticmethod
    def _to_domain(raw: dict) -> Any:
        raise NotImplementedError

    @staticmethod
    def _upsert(records: list[dict], record: dict) -> None:
        for i, raw in enumerate(records):
            if raw["id"] == record["id"]:
                records[i] = record
                return
        records.append(record)
