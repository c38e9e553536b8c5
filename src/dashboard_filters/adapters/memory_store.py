"""
In-Memory Filters Store.

Keeps each user's canonical filters JSON in a dict. Intended for tests and
single-process deployments.

Design Notes:
    - Thread-safe with reentrant lock
    - Each document is tagged with a sha256 etag for change detection
"""

from __future__ import annotations

import hashlib
import logging
import threading
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


def document_etag(document: str) -> str:
    """Content hash of a stored document."""
    return hashlib.sha256(document.encode("utf-8")).hexdigest()


class InMemoryFiltersStore:
    """Thread-safe in-process store of filters documents."""

    def __init__(self) -> None:
        self._documents: Dict[str, str] = {}
        self._lock = threading.RLock()

    def load(self, user: str) -> Optional[str]:
        with self._lock:
            return self._documents.get(user)

    def save(self, user: str, document: str) -> None:
        with self._lock:
            self._documents[user] = document
        logger.info(f"Stored views for {user} (etag={document_etag(document)[:12]})")

    def etag(self, user: str) -> Optional[str]:
        """Etag of the user's stored document, or None if absent."""
        with self._lock:
            document = self._documents.get(user)
        return document_etag(document) if document is not None else None

    def delete(self, user: str) -> bool:
        """
        Remove a user's stored document.

        Returns:
            True if a document was removed, False if none existed
        """
        with self._lock:
            if user not in self._documents:
                return False
            del self._documents[user]
        logger.info(f"Removed views for {user}")
        return True

    def users(self) -> List[str]:
        with self._lock:
            return sorted(self._documents)
