"""SQLite-backed store for the job application tracker board.

Each application is one row, keyed by a random hex id and scoped to an
opaque user id. A new connection is opened per operation so the store can
be used from FastAPI's threadpool without sharing connections.
"""

import logging
import sqlite3
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

STATUSES = ("saved", "applied", "interview", "offer", "rejected")
DEFAULT_STATUS = "saved"

# Columns a client may change after creation
UPDATABLE_FIELDS = ("job_title", "company", "job_url", "match_score", "status", "notes")

_COLUMNS = (
    "id", "user_id", "job_title", "company", "job_url",
    "match_score", "status", "notes", "created_at", "updated_at",
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS applications (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    job_title TEXT,
    company TEXT,
    job_url TEXT,
    match_score REAL,
    status TEXT NOT NULL DEFAULT 'saved',
    notes TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""
_INDEX = "CREATE INDEX IF NOT EXISTS idx_applications_user ON applications (user_id, created_at)"


class TrackerError(Exception):
    """Raised when the tracker database cannot be read or written."""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _validate_status(status: str) -> None:
    if status not in STATUSES:
        raise ValueError(f"Invalid status {status!r}; expected one of {', '.join(STATUSES)}")


class TrackerStore:
    def __init__(self, db_path: str | Path) -> None:
        self.db_path = str(db_path)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self) -> None:
        self._run(_SCHEMA)
        self._run(_INDEX)
        logger.info("Tracker db ready at %s", self.db_path)

    def _run(self, query: str, params: tuple | list = ()) -> list[sqlite3.Row]:
        conn = self._connect()
        try:
            with conn:
                rows = conn.execute(query, params).fetchall()
        except sqlite3.Error as e:
            logger.error("Tracker db error: %s", e)
            raise TrackerError(str(e)) from e
        finally:
            conn.close()
        return rows

    def list_jobs(self, user_id: str) -> list[dict[str, Any]]:
        """All applications for a user, newest first."""
        rows = self._run(
            f"SELECT {', '.join(_COLUMNS)} FROM applications "
            "WHERE user_id = ? ORDER BY created_at DESC, rowid DESC",
            (user_id,),
        )
        return [dict(r) for r in rows]

    def get_job(self, job_id: str) -> dict[str, Any] | None:
        rows = self._run(
            f"SELECT {', '.join(_COLUMNS)} FROM applications WHERE id = ?",
            (job_id,),
        )
        return dict(rows[0]) if rows else None

    def create_job(
        self,
        user_id: str,
        job_title: str | None = None,
        company: str | None = None,
        job_url: str | None = None,
        match_score: float | None = None,
        status: str | None = None,
        notes: str | None = None,
    ) -> dict[str, Any]:
        if not user_id:
            raise ValueError("user_id is required")
        status = status or DEFAULT_STATUS
        _validate_status(status)

        now = _now()
        record = {
            "id": uuid.uuid4().hex,
            "user_id": user_id,
            "job_title": job_title,
            "company": company,
            "job_url": job_url,
            "match_score": match_score,
            "status": status,
            "notes": notes,
            "created_at": now,
            "updated_at": now,
        }
        placeholders = ", ".join("?" for _ in _COLUMNS)
        self._run(
            f"INSERT INTO applications ({', '.join(_COLUMNS)}) VALUES ({placeholders})",
            [record[c] for c in _COLUMNS],
        )
        logger.info("Tracker job %s created for user %s", record["id"], user_id)
        return record

    def update_job(self, job_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        """Apply a partial update. Returns the updated record, or None if unknown."""
        changes = {k: v for k, v in updates.items() if k in UPDATABLE_FIELDS}
        if changes.get("status", DEFAULT_STATUS) is None:
            del changes["status"]
        if "status" in changes:
            _validate_status(changes["status"])

        if self.get_job(job_id) is None:
            return None

        changes["updated_at"] = _now()
        assignments = ", ".join(f"{k} = ?" for k in changes)
        self._run(
            f"UPDATE applications SET {assignments} WHERE id = ?",
            [*changes.values(), job_id],
        )
        return self.get_job(job_id)

    def delete_job(self, job_id: str) -> None:
        self._run("DELETE FROM applications WHERE id = ?", (job_id,))
        logger.info("Tracker job %s deleted", job_id)
