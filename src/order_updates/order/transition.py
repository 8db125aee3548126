"""Transition detection: the only gate between an order update and a push."""

from order_updates.order.snapshot import OrderSnapshot


def should_dispatch(before: OrderSnapshot, after: OrderSnapshot) -> bool:
    """Return True when the order status changed between the two snapshots.

    Statuses are compared as exact strings: ``"Ready"`` to ``"ready"`` counts
    as a change even though both resolve to the same content.
    """
    return before.status != after.status
