"""Fake audit store: keeps documents in memory for testing."""

from datetime import UTC, datetime
from uuid import uuid4

from order_updates.audit.store_port import AuditStoreError, AuditStorePort


class FakeAuditStore(AuditStorePort):
    """Audit store that records documents in memory for test assertions."""

    def __init__(self):
        self.collections: dict[str, list[dict]] = {}
        self.should_succeed = True
        self.failure_reason = "Audit write failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Audit write failed"):
        """Configure the fake store behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def add(self, collection: str, document: dict) -> str:
        if not self.should_succeed:
            raise AuditStoreError(self.failure_reason)

        document_id = uuid4().hex
        self.collections.setdefault(collection, []).append(
            {"id": document_id, **document, "timestamp": datetime.now(UTC)}
        )

        return document_id

    def documents(self, collection: str) -> list[dict]:
        return self.collections.get(collection, [])

    def reset(self):
        """Clear stored documents (useful between tests)."""
        self.collections.clear()
        self.should_succeed = True
        self.failure_reason = "Audit write failed"
