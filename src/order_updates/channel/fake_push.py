"""Fake push notification adapter: records sent pushes for testing."""

from uuid import uuid4

from order_updates.channel.push_port import PushDeliveryError, PushPort


class FakePushAdapter(PushPort):
    """Push adapter that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_pushes: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Push delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Push delivery failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(self, message: dict) -> str:
        if not self.should_succeed:
            raise PushDeliveryError(self.failure_reason)

        message_id = f"projects/order-updates/messages/{uuid4().hex[:12]}"
        self.sent_pushes.append({"message_id": message_id, **message})

        return message_id

    def reset(self):
        """Clear sent pushes (useful between tests)."""
        self.sent_pushes.clear()
        self.should_succeed = True
        self.failure_reason = "Push delivery failed"
