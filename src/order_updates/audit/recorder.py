"""Outcome recorder: writes one audit document per dispatch attempt."""

import structlog

from order_updates.audit.delivery_record import (
    NOTIFICATIONS_COLLECTION,
    NotificationRecordType,
    redact_token,
)
from order_updates.audit.store_port import AuditStorePort

logger = structlog.get_logger(__name__)


class OutcomeRecorder:
    """Appends delivery outcomes to the ``notifications`` collection."""

    def __init__(self, store: AuditStorePort):
        self.store = store

    def record_success(
        self,
        order_id: str,
        status: str,
        title: str,
        body: str,
        device_token: str,
        message_id: str,
    ) -> str:
        """Record a sent notification.

        Only a redacted prefix of the device token reaches the audit trail.
        """
        document_id = self.store.add(
            NOTIFICATIONS_COLLECTION,
            {
                "orderId": order_id,
                "status": status,
                "title": title,
                "body": body,
                "sent": True,
                "type": NotificationRecordType.ORDER_UPDATE.value,
                "deviceToken": redact_token(device_token),
                "messageId": message_id,
            },
        )
        logger.info("Notification record created", order_id=order_id, record_id=document_id)
        return document_id

    def record_failure(self, order_id: str, status: str, error: str) -> str:
        """Record a notification that could not be sent."""
        document_id = self.store.add(
            NOTIFICATIONS_COLLECTION,
            {
                "orderId": order_id,
                "status": status,
                "sent": False,
                "error": error,
                "type": NotificationRecordType.ORDER_UPDATE_FAILED.value,
            },
        )
        logger.info("Failed notification recorded", order_id=order_id, record_id=document_id)
        return document_id
