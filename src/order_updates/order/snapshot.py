"""OrderSnapshot value object: one side of an observed order update.

The Ordering store hands over the whole order document before and after each
update. Only the fields that drive a status notification are kept here.
"""

from enum import Enum

from protean.fields import String, Text

from order_updates.domain import order_updates

# Length of the identifier suffix shown to customers when the order carries no
# human order number of its own.
ORDER_NUMBER_SUFFIX_LENGTH = 6


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    COLLECTED = "collected"


@order_updates.value_object
class OrderSnapshot:
    """Immutable view of an order document at one point in time."""

    order_id = String(required=True, max_length=255, sanitize=False)
    status = Text(sanitize=False)
    order_number = Text(sanitize=False)
    device_token = Text(sanitize=False)

    @classmethod
    def from_document(cls, order_id, document):
        """Build a snapshot from a raw order document.

        The document uses the Ordering store's keys: ``status``, ``orderId``
        (the human order number) and ``deviceToken``. A missing document gives
        a snapshot with no status.
        """
        document = document or {}
        return cls(
            order_id=str(order_id),
            status=document.get("status"),
            order_number=_optional_str(document.get("orderId")),
            device_token=document.get("deviceToken"),
        )

    @property
    def display_number(self) -> str:
        """Order number shown to the customer, or the tail of the identifier."""
        if self.order_number:
            return str(self.order_number)
        return self.order_id[-ORDER_NUMBER_SUFFIX_LENGTH:]

    @property
    def has_destination(self) -> bool:
        return bool(self.device_token)


def _optional_str(value):
    return None if value is None else str(value)
