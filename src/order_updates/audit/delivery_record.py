"""DeliveryRecord aggregate: append-only audit entry for one dispatch attempt.

One record is written for every order update that passes the status check,
whether the push went out or not. Records are never updated or deleted here.
The stored field names follow the ``notifications`` collection format
(``orderId``, ``messageId``, ``deviceToken``, ``type``), see ``to_document``.
"""

from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from order_updates.domain import order_updates

NOTIFICATIONS_COLLECTION = "notifications"

# Characters of the device token kept in the audit trail.
REDACTED_TOKEN_LENGTH = 20


class NotificationRecordType(Enum):
    ORDER_UPDATE = "order_update"
    ORDER_UPDATE_FAILED = "order_update_failed"


def redact_token(device_token: str) -> str:
    """Keep the first 20 characters of a device token and mark the cut."""
    return f"{device_token[:REDACTED_TOKEN_LENGTH]}..."


@order_updates.aggregate
class DeliveryRecord:
    """Outcome of one push attempt for an order status change."""

    order_id: Identifier(required=True)
    status: Text(required=True, sanitize=False)

    # Present only when the push was sent
    title: Text(sanitize=False)
    body: Text(sanitize=False)
    message_id: String(max_length=500, sanitize=False)
    device_token: String(max_length=50, sanitize=False)

    # Present only when the push failed
    error: Text(sanitize=False)

    sent: Boolean(default=False)
    notification_type: String(choices=NotificationRecordType, required=True)
    timestamp: DateTime(required=True)

    @invariant.post
    def outcome_matches_sent_flag(self):
        if self.sent and not self.message_id:
            raise ValidationError({"message_id": ["A sent notification must carry a message id"]})
        if not self.sent and not self.error:
            raise ValidationError({"error": ["A failed notification must carry an error"]})

    @classmethod
    def from_document(cls, document: dict, timestamp):
        """Build a record from a ``notifications`` collection document."""
        return cls(
            order_id=document["orderId"],
            status=document["status"],
            title=document.get("title"),
            body=document.get("body"),
            message_id=document.get("messageId"),
            device_token=document.get("deviceToken"),
            error=document.get("error"),
            sent=bool(document.get("sent")),
            notification_type=document["type"],
            timestamp=timestamp,
        )

    def to_document(self) -> dict:
        """Render the record in the ``notifications`` collection format."""
        document = {
            "orderId": str(self.order_id),
            "status": self.status,
            "timestamp": self.timestamp,
            "sent": self.sent,
            "type": self.notification_type,
        }
        if self.sent:
            document.update(
                title=self.title,
                body=self.body,
                deviceToken=self.device_token,
                messageId=self.message_id,
            )
        else:
            document["error"] = self.error
        return document
