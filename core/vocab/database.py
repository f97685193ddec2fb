"""
Database - Persistence Gateway for the learner state blob.

Handles ONLY database I/O. Failures are logged and swallowed: the in-memory
state keeps working for the rest of the session even if the store is gone.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import structlog
from dotenv import load_dotenv
from pydantic import ValidationError
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.vocab.constants import STORAGE_SLOT
from core.vocab.models import Base, LearnerStateRow
from core.vocab.schemas import LearnerState

load_dotenv()

logger = structlog.get_logger(__name__)

# Engine creation can fail on a bad dialect, a missing driver or an unwritable path
STORE_ERRORS = (SQLAlchemyError, OSError, ImportError)

# Local SQLite fallback when DATABASE_URL is not set
DB_DIR = Path(__file__).parent.parent.parent / "logs"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    DATABASE_URL wins when set; in test mode 'learning_lab' in its name is
    swapped for 'test_learning_lab'. Without it, a SQLite file under logs/
    is used (learning_lab.db or test_learning_lab.db).
    """
    base_url = os.getenv("DATABASE_URL")
    if base_url:
        if is_test_mode():
            return base_url.replace("learning_lab", "test_learning_lab")
        return base_url

    db_name = "test_learning_lab.db" if is_test_mode() else "learning_lab.db"
    return f"sqlite:///{DB_DIR / db_name}"


def get_state_slot() -> str:
    return os.getenv("LAB_STATE_SLOT", STORAGE_SLOT)


def _ensure_sqlite_dir(url: str) -> None:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return
    database = parsed.database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


class StateGateway:
    """
    Load/save the LearnerState stored under one named slot.
    """

    def __init__(self, database_url: Optional[str] = None, slot: Optional[str] = None):
        self.database_url = database_url or get_database_url()
        self.slot = slot or get_state_slot()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def get_engine(self) -> Engine:
        if self._engine is None:
            if make_url(self.database_url).get_backend_name() == "sqlite":
                _ensure_sqlite_dir(self.database_url)
                self._engine = create_engine(self.database_url, echo=False)
            else:
                self._engine = create_engine(
                    self.database_url,
                    pool_size=5,
                    max_overflow=10,
                    pool_pre_ping=True,
                    echo=False
                )
        return self._engine

    def get_session(self) -> Session:
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.get_engine(), expire_on_commit=False)
        return self._session_factory()

    def init_db(self) -> bool:
        """
        Create the learner_state table if it does not exist.

        Safe to call multiple times.
        """
        try:
            Base.metadata.create_all(self.get_engine())
        except STORE_ERRORS as e:
            logger.error(f"Failed to initialize state store: {e!s}", exc_info=True)
            return False
        return True

    def load(self) -> Optional[LearnerState]:
        """
        Read the stored state.

        Returns:
            LearnerState, or None when the slot is empty, corrupt or unreadable
        """
        session: Optional[Session] = None
        try:
            session = self.get_session()
            row = session.get(LearnerStateRow, self.slot)
            if row is None:
                return None
            return LearnerState.model_validate_json(row.payload)
        except ValidationError as e:
            logger.error("Stored learner state is corrupt, ignoring it", slot=self.slot, errors=e.error_count())
            return None
        except STORE_ERRORS as e:
            logger.error(f"Failed to load learner state: {e!s}", slot=self.slot, exc_info=True)
            return None
        finally:
            if session is not None:
                session.close()

    def save(self, state: LearnerState) -> bool:
        """
        Insert or replace the stored state.

        Returns:
            True on success, False if the write failed (already logged)
        """
        payload = state.model_dump_json()
        session: Optional[Session] = None
        try:
            session = self.get_session()
            row = session.get(LearnerStateRow, self.slot)
            now = datetime.now(timezone.utc)
            if row is None:
                session.add(LearnerStateRow(slot=self.slot, payload=payload, updated_at=now))
            else:
                row.payload = payload
                row.updated_at = now
            session.commit()
            return True
        except STORE_ERRORS as e:
            if session is not None:
                session.rollback()
            logger.error(f"Failed to save learner state: {e!s}", slot=self.slot, exc_info=True)
            return False
        finally:
            if session is not None:
                session.close()

    def clear(self) -> bool:
        """
        DANGEROUS: Delete the stored state for this slot.
        """
        session: Optional[Session] = None
        try:
            session = self.get_session()
            session.query(LearnerStateRow).filter(LearnerStateRow.slot == self.slot).delete()
            session.commit()
            return True
        except STORE_ERRORS as e:
            if session is not None:
                session.rollback()
            logger.error(f"Failed to clear learner state: {e!s}", slot=self.slot, exc_info=True)
            return False
        finally:
            if session is not None:
                session.close()
