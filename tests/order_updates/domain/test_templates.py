"""Tests for order status templates: rendering and registry."""

import pytest
from order_updates.order.snapshot import OrderStatus
from order_updates.templates import (
    DEFAULT_TEMPLATE,
    TEMPLATE_REGISTRY,
    body_for,
    get_template,
    render,
    title_for,
)
from order_updates.templates.order_status import (
    FoodPreparingTemplate,
    OrderCollectedTemplate,
    OrderConfirmedTemplate,
    OrderReadyTemplate,
    OrderReceivedTemplate,
)

EXPECTED_CONTENT = {
    "pending": (
        "Order Received!",
        "We have received order #12345 and will start preparing it soon!",
    ),
    "confirmed": (
        "Order Confirmed!",
        "Order #12345 confirmed. Estimated time: 25-35 minutes.",
    ),
    "preparing": (
        "Food Being Prepared!",
        "Our chefs are now preparing your delicious order #12345!",
    ),
    "ready": (
        "Order Ready for Collection!",
        "Order #12345 is ready! Please come and collect it.",
    ),
    "collected": (
        "Order Collected!",
        "Thank you for collecting order #12345! Enjoy your meal!",
    ),
}


# ---------------------------------------------------------------
# Template registry
# ---------------------------------------------------------------
class TestTemplateRegistry:
    def test_registry_has_5_templates(self):
        assert len(TEMPLATE_REGISTRY) == 5

    def test_every_order_status_has_a_template(self):
        for status in OrderStatus:
            assert status.value in TEMPLATE_REGISTRY, f"Missing template for {status.value}"

    def test_get_template_returns_correct_class(self):
        assert get_template("ready") is OrderReadyTemplate

    def test_get_template_ignores_case(self):
        assert get_template("CONFIRMED") is OrderConfirmedTemplate
        assert get_template("Preparing") is FoodPreparingTemplate

    def test_get_template_unknown_status_falls_back(self):
        assert get_template("refunded") is DEFAULT_TEMPLATE

    def test_template_status_matches_registry_key(self):
        for key, template_cls in TEMPLATE_REGISTRY.items():
            assert template_cls.status == key


# ---------------------------------------------------------------
# Known statuses
# ---------------------------------------------------------------
class TestKnownStatusContent:
    @pytest.mark.parametrize("status", sorted(EXPECTED_CONTENT))
    def test_render_matches_table(self, status):
        title, body = EXPECTED_CONTENT[status]
        assert render(status, "12345") == {"title": title, "body": body}

    @pytest.mark.parametrize("status", ["PENDING", "Confirmed", "pReParInG", "READY", "Collected"])
    def test_title_and_body_are_case_insensitive(self, status):
        title, body = EXPECTED_CONTENT[status.lower()]
        assert title_for(status) == title
        assert body_for(status, "12345") == body

    def test_received_template(self):
        assert OrderReceivedTemplate.render("pending", "A1")["title"] == "Order Received!"

    def test_collected_template_mentions_order_number(self):
        assert "#XYZ789" in OrderCollectedTemplate.render("collected", "XYZ789")["body"]


# ---------------------------------------------------------------
# Default template
# ---------------------------------------------------------------
class TestDefaultTemplate:
    def test_unknown_status_title(self):
        assert title_for("out_for_delivery") == "Order Update"

    def test_unknown_status_body_echoes_status(self):
        assert body_for("cancelled", "555") == "Order #555 status updated to: cancelled"

    def test_unknown_status_keeps_original_casing(self):
        assert body_for("Refunded-Partially", "9") == "Order #9 status updated to: Refunded-Partially"

    def test_empty_status_uses_default(self):
        assert render("", "1") == {"title": "Order Update", "body": "Order #1 status updated to: "}

    def test_render_has_no_side_effects(self):
        first = render("ready", "42")
        second = render("ready", "42")
        assert first == second
        assert first is not second
