"""Delivery result: explicit outcome of a single push attempt."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeliveryResult:
    message_id: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.message_id is not None

    @classmethod
    def delivered(cls, message_id: str) -> "DeliveryResult":
        return cls(message_id=message_id)

    @classmethod
    def failed(cls, error: str) -> "DeliveryResult":
        return cls(error=error)
