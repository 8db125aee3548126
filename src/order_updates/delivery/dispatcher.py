"""Delivery dispatcher: builds the push payload and sends it once."""

import structlog

from order_updates.channel.push_port import PushDeliveryError, PushPort
from order_updates.delivery.payload import NotificationPayload
from order_updates.delivery.result import DeliveryResult

logger = structlog.get_logger(__name__)


class DeliveryDispatcher:
    """Sends order update pushes through a push client. Never retries."""

    def __init__(self, client: PushPort):
        self.client = client

    def dispatch(
        self,
        device_token: str,
        title: str,
        body: str,
        order_id: str,
        status: str,
        order_number: str,
    ) -> DeliveryResult:
        """Send one push and report the provider's answer.

        Provider rejections come back as a failed result. Anything else the
        client raises is left to the caller.
        """
        payload = NotificationPayload(
            title=title,
            body=body,
            order_id=order_id,
            status=status,
            order_number=order_number,
        )

        try:
            message_id = self.client.send(payload.to_message(device_token))
        except PushDeliveryError as exc:
            logger.warning(
                "Push provider rejected notification",
                order_id=order_id,
                status=status,
                error=exc.message,
                code=exc.code,
            )
            return DeliveryResult.failed(exc.message or type(exc).__name__)

        logger.info("Notification sent successfully", order_id=order_id, message_id=message_id)
        return DeliveryResult.delivered(message_id)
