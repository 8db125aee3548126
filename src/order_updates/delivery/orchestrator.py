"""Dispatch orchestrator: one order update in, at most one audit record out.

State machine per order update:
    START → GATED_OUT                              (status unchanged, no record)
    START → NO_DESTINATION                         (no device token, no record)
    START → DUPLICATE                              (guard saw it already, no record)
    START → DELIVERED → RECORDED_SUCCESS
    START → DELIVERY_FAILED → RECORDED_FAILURE
    START → UNEXPECTED_FAILURE → RECORDED_FAILURE

``handle`` never raises. An exception escaping to the event infrastructure
would make it redeliver the update and push the same notification again.
"""

from dataclasses import dataclass
from enum import Enum

import structlog

from order_updates import templates
from order_updates.audit.recorder import OutcomeRecorder
from order_updates.audit.store_port import AuditStorePort
from order_updates.channel.push_port import PushPort
from order_updates.delivery.dispatcher import DeliveryDispatcher
from order_updates.delivery.idempotency import TransitionGuard
from order_updates.order.snapshot import OrderSnapshot
from order_updates.order.transition import should_dispatch

logger = structlog.get_logger(__name__)

UNKNOWN_STATUS = "unknown"


class DispatchState(Enum):
    GATED_OUT = "GatedOut"
    NO_DESTINATION = "NoDestination"
    DUPLICATE = "Duplicate"
    RECORDED_SUCCESS = "RecordedSuccess"
    RECORDED_FAILURE = "RecordedFailure"


@dataclass(frozen=True)
class DispatchOutcome:
    state: DispatchState
    message_id: str | None = None
    error: str | None = None


class DispatchOrchestrator:
    """Runs gate → content → delivery → audit for a single order update."""

    def __init__(
        self,
        push_client: PushPort,
        audit_store: AuditStorePort,
        guard: TransitionGuard | None = None,
    ):
        self.dispatcher = DeliveryDispatcher(push_client)
        self.recorder = OutcomeRecorder(audit_store)
        self.guard = guard

    def handle(self, order_id: str, before: OrderSnapshot, after: OrderSnapshot) -> DispatchOutcome:
        """Process one order update and report which terminal state it reached."""
        with structlog.contextvars.bound_contextvars(order_id=order_id):
            try:
                if not should_dispatch(before, after):
                    logger.info("Status did not change, skipping notification", status=after.status)
                    return DispatchOutcome(DispatchState.GATED_OUT)

                return self._deliver(order_id, before, after)
            except Exception as exc:
                logger.error("Error sending notification", error=str(exc), exc_info=True)
                return self.record_failure(order_id, getattr(after, "status", None), _error_message(exc))

    def _deliver(self, order_id: str, before: OrderSnapshot, after: OrderSnapshot) -> DispatchOutcome:
        logger.info("Status changed for order", from_status=before.status, to_status=after.status)

        if not after.has_destination:
            logger.info("No device token found for order")
            return DispatchOutcome(DispatchState.NO_DESTINATION)

        if self.guard is not None and not self.guard.claim(order_id, before.status, after.status):
            logger.info("Transition already dispatched, skipping duplicate", to_status=after.status)
            return DispatchOutcome(DispatchState.DUPLICATE)

        order_number = after.display_number
        content = templates.render(after.status, order_number)

        result = self.dispatcher.dispatch(
            device_token=after.device_token,
            title=content["title"],
            body=content["body"],
            order_id=order_id,
            status=after.status,
            order_number=order_number,
        )
        if not result.ok:
            return self.record_failure(order_id, after.status, result.error)

        self.recorder.record_success(
            order_id=order_id,
            status=after.status,
            title=content["title"],
            body=content["body"],
            device_token=after.device_token,
            message_id=result.message_id,
        )
        return DispatchOutcome(DispatchState.RECORDED_SUCCESS, message_id=result.message_id)

    def record_failure(self, order_id: str, status: str | None, error: str) -> DispatchOutcome:
        """Write the failure record for an update, using "unknown" when no status is known."""
        status = status or UNKNOWN_STATUS
        try:
            self.recorder.record_failure(order_id=order_id, status=status, error=error)
        except Exception as exc:
            logger.error("Could not record failed notification", error=str(exc), exc_info=True)

        return DispatchOutcome(DispatchState.RECORDED_FAILURE, error=error)


def _error_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def build_orchestrator() -> DispatchOrchestrator:
    """Build an orchestrator from the process-wide client, store and guard."""
    from order_updates.audit import get_audit_store
    from order_updates.channel import get_channel
    from order_updates.delivery.idempotency import get_guard

    return DispatchOrchestrator(
        push_client=get_channel(),
        audit_store=get_audit_store(),
        guard=get_guard(),
    )
