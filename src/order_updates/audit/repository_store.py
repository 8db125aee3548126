"""Repository-backed audit store: persists DeliveryRecord aggregates.

Writes go through the repository of the active protean domain, so the
backing database is whatever ``domain.toml`` configures for the current
environment.
"""

from datetime import UTC, datetime

import structlog
from protean.utils.globals import current_domain

from order_updates.audit.delivery_record import NOTIFICATIONS_COLLECTION, DeliveryRecord
from order_updates.audit.store_port import AuditStorePort

logger = structlog.get_logger(__name__)


class RepositoryAuditStore(AuditStorePort):
    """Stores ``notifications`` documents as DeliveryRecord aggregates."""

    def add(self, collection: str, document: dict) -> str:
        if collection != NOTIFICATIONS_COLLECTION:
            raise ValueError(f"Unknown audit collection: {collection}")

        record = DeliveryRecord.from_document(document, timestamp=datetime.now(UTC))
        current_domain.repository_for(DeliveryRecord).add(record)

        logger.debug(
            "Delivery record stored",
            record_id=str(record.id),
            order_id=str(record.order_id),
            notification_type=record.notification_type,
        )

        return str(record.id)

    def records_for_order(self, order_id: str) -> list[DeliveryRecord]:
        """Return every delivery record written for an order."""
        repo = current_domain.repository_for(DeliveryRecord)
        return repo._dao.query.filter(order_id=order_id).all().items
