"""Push notification channel port: abstract interface for push delivery."""

from abc import ABC, abstractmethod


class PushDeliveryError(Exception):
    """The push provider rejected the message or failed to send it."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class PushPort(ABC):
    """Abstract interface for push notification delivery clients."""

    @abstractmethod
    def send(self, message: dict) -> str:
        """Send a single push message and wait for the provider's answer.

        Args:
            message: Provider request with keys ``token``, ``notification``,
                ``data``, ``android`` and ``apns``.

        Returns:
            The provider's message identifier.

        Raises:
            PushDeliveryError: if the provider refused or failed to send.
        """
        ...
