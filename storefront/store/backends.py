"""
Document backends for the repair record store.

A backend only knows how to keep JSON-ready documents keyed by id. Schema
rules, ids and timestamps belong to :class:`RepairRecordStore`. Backends
signal an unreachable storage medium by raising ``OSError`` (including
``ConnectionError``), which the store translates.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class DocumentBackend(Protocol):
    """Minimal document collection interface."""

    def put(self, document: dict) -> None: ...

    def get(self, document_id: str) -> Optional[dict]: ...

    def all(self) -> list[dict]: ...

    def clear(self) -> None: ...


class InMemoryBackend:
    """Process-local collection. Used by default and by test fixtures."""

    def __init__(self) -> None:
        self._documents: dict[str, dict] = {}

    def put(self, document: dict) -> None:
        self._documents[document["id"]] = dict(document)

    def get(self, document_id: str) -> Optional[dict]:
        document = self._documents.get(document_id)
        return dict(document) if document is not None else None

    def all(self) -> list[dict]:
        return [dict(doc) for doc in self._documents.values()]

    def clear(self) -> None:
        self._documents.clear()


class JsonFileBackend:
    """
    Append-only JSON-lines collection on disk.

    One document per line. The parent directory must already exist; a
    missing directory or unwritable file surfaces as ``OSError``.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def put(self, document: dict) -> None:
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(document, sort_keys=True) + "\n")

    def get(self, document_id: str) -> Optional[dict]:
        for document in self.all():
            if document.get("id") == document_id:
                return document
        return None

    def all(self) -> list[dict]:
        if not self.path.exists():
            return []
        documents = []
        with self.path.open("r", encoding="utf-8") as fh:
            for line_no, line in enumerate(fh, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    documents.append(json.loads(line))
                except json.JSONDecodeError:
                    logger.warning("Skipping corrupt line %d in %s", line_no, self.path)
        return documents

    def clear(self) -> None:
        if self.path.exists():
            self.path.write_text("", encoding="utf-8")
