"""Audit store port: abstract interface for the append-only audit trail."""

from abc import ABC, abstractmethod


class AuditStoreError(Exception):
    """The audit store could not persist a document."""


class AuditStorePort(ABC):
    """Abstract interface for audit store adapters."""

    @abstractmethod
    def add(self, collection: str, document: dict) -> str:
        """Append a document to a collection.

        The store assigns the document's ``timestamp`` at write time; callers
        never supply one.

        Returns:
            The identifier of the stored document.
        """
        ...
