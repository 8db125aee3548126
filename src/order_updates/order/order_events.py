"""Inbound cross-domain event handler: Order Updates reacts to Ordering events.

Listens for OrderUpdated and hands each update to the dispatch orchestrator.
The handler never raises: a raised exception would make the event
infrastructure redeliver the update and push the notification twice.
"""

import structlog
from protean.utils.mixins import handle

from order_updates.audit.delivery_record import DeliveryRecord
from order_updates.delivery.orchestrator import DispatchOutcome, DispatchState, build_orchestrator
from order_updates.domain import order_updates
from order_updates.order.snapshot import OrderSnapshot
from shared.events.ordering import OrderUpdated

logger = structlog.get_logger(__name__)

order_updates.register_external_event(OrderUpdated, "Ordering.OrderUpdated.v1")


@order_updates.event_handler(part_of=DeliveryRecord, stream_category="ordering::order")
class OrderUpdatesHandler:
    """Pushes a notification to the customer when an order's status changes."""

    @handle(OrderUpdated)
    def on_order_updated(self, event: OrderUpdated) -> DispatchOutcome:
        order_id = str(event.order_id)
        orchestrator = build_orchestrator()

        try:
            before = OrderSnapshot.from_document(order_id, event.before)
            after = OrderSnapshot.from_document(order_id, event.after)
        except Exception as exc:
            before_status = _raw_status(event.before)
            after_status = _raw_status(event.after)
            if before_status == after_status:
                logger.info("Status did not change, skipping notification", order_id=order_id, status=after_status)
                return DispatchOutcome(DispatchState.GATED_OUT)

            logger.error("Unreadable order document", order_id=order_id, error=str(exc))
            return orchestrator.record_failure(order_id, after_status, str(exc) or type(exc).__name__)

        outcome = orchestrator.handle(order_id, before, after)

        logger.debug("Order update handled", order_id=order_id, state=outcome.state.value)
        return outcome


def _raw_status(document):
    status = (document or {}).get("status")
    return None if status is None else str(status)
