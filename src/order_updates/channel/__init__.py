"""Push channel registry: process-wide push client handle.

Uses the fake adapter by default. A real provider client (e.g. FCM) is
installed once at process start with ``set_channel``.
"""

from order_updates.channel.push_port import PushPort

_push_client: PushPort | None = None


def get_channel() -> PushPort:
    """Return the configured push client (created on first use)."""
    global _push_client
    if _push_client is None:
        from order_updates.channel.fake_push import FakePushAdapter

        _push_client = FakePushAdapter()

    return _push_client


def set_channel(client: PushPort) -> None:
    """Install the push client used by the event handlers."""
    global _push_client
    if not isinstance(client, PushPort):
        raise ValueError(f"Not a push client: {client!r}")
    _push_client = client


def reset_channels():
    """Drop the push client singleton (useful for testing)."""
    global _push_client
    _push_client = None
