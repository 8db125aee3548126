"""Template registry: maps order statuses to notification text.

Lookup lower-cases the status first. Any status without a registered
template falls back to the generic "Order Update" text, which echoes the
status as it was received.
"""

from order_updates.order.snapshot import OrderStatus
from order_updates.templates.order_status import (
    FoodPreparingTemplate,
    OrderCollectedTemplate,
    OrderConfirmedTemplate,
    OrderReadyTemplate,
    OrderReceivedTemplate,
    OrderStatusTemplate,
)

TEMPLATE_REGISTRY: dict[str, type[OrderStatusTemplate]] = {
    OrderStatus.PENDING.value: OrderReceivedTemplate,
    OrderStatus.CONFIRMED.value: OrderConfirmedTemplate,
    OrderStatus.PREPARING.value: FoodPreparingTemplate,
    OrderStatus.READY.value: OrderReadyTemplate,
    OrderStatus.COLLECTED.value: OrderCollectedTemplate,
}

DEFAULT_TEMPLATE = OrderStatusTemplate


def get_template(status: str) -> type[OrderStatusTemplate]:
    """Look up the template for a status, case-insensitively."""
    return TEMPLATE_REGISTRY.get(status.lower(), DEFAULT_TEMPLATE)


def render(status: str, order_number: str) -> dict:
    """Render ``{"title", "body"}`` for a status and order number."""
    return get_template(status).render(status, order_number)


def title_for(status: str) -> str:
    return get_template(status).title


def body_for(status: str, order_number: str) -> str:
    return render(status, order_number)["body"]
