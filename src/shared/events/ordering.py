"""Cross-domain event contracts for Ordering domain events.

These classes define the event shape for consumption by other domains
(e.g., the Order Updates domain to push status notifications to the
customer's device). They are registered as external events via
domain.register_external_event() with matching __type__ strings so
Protean's stream deserialization works correctly.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Dict, Identifier


class OrderUpdated(BaseEvent):
    """An order document was updated in the Ordering store.

    Carries the whole document as it was before and after the write. The
    Ordering side raises it for every update, including ones that leave the
    status untouched.
    """

    __version__ = 1

    order_id = Identifier(required=True)
    before = Dict()
    after = Dict()
    updated_at = DateTime()
