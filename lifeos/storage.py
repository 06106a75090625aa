"""Persistence for reminders and notes"""

import json
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from . import config

logger = logging.getLogger(__name__)


class PersistenceFailure(RuntimeError):
    """Raised when the store cannot be read or written"""


class Reminder:
    __slots__ = ("id", "content", "created_at", "trigger_at", "is_completed")

    def __init__(self, content: str, created_at: datetime, trigger_at: datetime,
                 id: str = None, is_completed: bool = False):
        self.id = id or str(uuid.uuid4())
        self.content = content
        self.created_at = created_at
        self.trigger_at = trigger_at
        self.is_completed = is_completed

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "content": self.content,
            "created_at": self.created_at.isoformat(),
            "trigger_at": self.trigger_at.isoformat(),
            "is_completed": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Reminder":
        return cls(
            content=data["content"],
            created_at=datetime.fromisoformat(data["created_at"]),
            trigger_at=datetime.fromisoformat(data["trigger_at"]),
            id=data.get("id"),
            is_completed=bool(data.get("is_completed", False)),
        )

    def __repr__(self) -> str:
        return f"Reminder({self.content!r}, trigger_at={self.trigger_at.isoformat()})"


class Note:
    __slots__ = ("id", "content", "created_at", "updated_at", "category")

    def __init__(self, content: str, created_at: datetime, updated_at: datetime = None,
                 id: str = None, category: str = "general"):
        self.id = id or str(uuid.uuid4())
        self.content = content
        self.created_at = created_at
        self.updated_at = updated_at or created_at
        self.category = category

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "content": self.content,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Note":
        return cls(
            content=data["content"],
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]) if data.get("updated_at") else None,
            id=data.get("id"),
            category=data.get("category", "general"),
        )

    def __repr__(self) -> str:
        return f"Note({self.content!r}, category={self.category!r})"


class PersistenceGateway(ABC):
    """
    Where reminders and notes live.

    Listings are newest first. Implementations raise :class:`PersistenceFailure`
    for anything that goes wrong underneath.
    """

    @abstractmethod
    def insert_reminder(self, content: str, created_at: datetime, trigger_at: datetime) -> Reminder:
        ...

    @abstractmethod
    def list_reminders(self) -> List[Reminder]:
        ...

    @abstractmethod
    def insert_note(self, content: str, created_at: datetime) -> Note:
        ...

    @abstractmethod
    def list_notes(self) -> List[Note]:
        ...


class InMemoryStore(PersistenceGateway):
    """Process-local store; everything is gone when the session ends"""

    def __init__(self):
        self._reminders: List[Reminder] = []
        self._notes: List[Note] = []
        self._lock = threading.Lock()

    def insert_reminder(self, content, created_at, trigger_at):
        reminder = Reminder(content, created_at, trigger_at)
        with self._lock:
            self._reminders.append(reminder)
        return reminder

    def list_reminders(self):
        with self._lock:
            return sorted(reversed(self._reminders), key=lambda r: r.created_at, reverse=True)

    def insert_note(self, content, created_at):
        note = Note(content, created_at)
        with self._lock:
            self._notes.append(note)
        return note

    def list_notes(self):
        with self._lock:
            return sorted(reversed(self._notes), key=lambda n: n.created_at, reverse=True)


class JsonFileStore(InMemoryStore):
    """
    Store backed by a single JSON document::

        {"reminders": [...], "notes": [...]}

    The file is read on first access and rewritten after every insert.
    """

    def __init__(self, path: Optional[Path] = None):
        super().__init__()
        self.path = Path(path) if path else config.STORE_FILE
        self._loaded = False

    def _ensure_loaded(self):
        if self._loaded:
            return
        try:
            if self.path.exists():
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                self._reminders = [Reminder.from_dict(r) for r in data.get("reminders", [])]
                self._notes = [Note.from_dict(n) for n in data.get("notes", [])]
                logger.info(
                    f"Loaded {len(self._reminders)} reminders and {len(self._notes)} notes "
                    f"from {self.path}"
                )
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            raise PersistenceFailure(f"Failed to load store {self.path}: {e}") from e
        self._loaded = True

    def _save(self):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            data = {
                "reminders": [r.to_dict() for r in self._reminders],
                "notes": [n.to_dict() for n in self._notes],
            }
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise PersistenceFailure(f"Failed to save store {self.path}: {e}") from e

    def _append_and_save(self, records: List, record):
        """Keep ``record`` only if the rewritten file includes it"""
        with self._lock:
            records.append(record)
            try:
                self._save()
            except PersistenceFailure:
                records.pop()
                raise
        return record

    def insert_reminder(self, content, created_at, trigger_at):
        self._ensure_loaded()
        return self._append_and_save(self._reminders, Reminder(content, created_at, trigger_at))

    def list_reminders(self):
        self._ensure_loaded()
        return super().list_reminders()

    def insert_note(self, content, created_at):
        self._ensure_loaded()
        return self._append_and_save(self._notes, Note(content, created_at))

    def list_notes(self):
        self._ensure_loaded()
        return super().list_notes()
