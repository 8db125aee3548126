"""Order Updates bounded context: push notifications on order status changes.

Consumes order update events from the Ordering domain, decides whether the
status actually changed, and pushes a notification to the device registered
on the order. Every dispatch attempt that gets past the status check is
written to the ``notifications`` audit collection, whether it succeeded or not.
"""

from protean.domain import Domain

from order_updates.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
order_updates = Domain(name="order_updates")
