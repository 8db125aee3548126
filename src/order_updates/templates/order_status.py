"""Order status templates: fixed title/body text for each known status."""

from order_updates.order.snapshot import OrderStatus


class OrderStatusTemplate:
    """Generic template, used for any status without its own text."""

    status: str | None = None
    title = "Order Update"
    body_template = "Order #{order_number} status updated to: {status}"

    @classmethod
    def render(cls, status: str, order_number: str) -> dict:
        return {
            "title": cls.title,
            "body": cls.body_template.format(order_number=order_number, status=status),
        }


class OrderReceivedTemplate(OrderStatusTemplate):
    status = OrderStatus.PENDING.value
    title = "Order Received!"
    body_template = "We have received order #{order_number} and will start preparing it soon!"


class OrderConfirmedTemplate(OrderStatusTemplate):
    status = OrderStatus.CONFIRMED.value
    title = "Order Confirmed!"
    body_template = "Order #{order_number} confirmed. Estimated time: 25-35 minutes."


class FoodPreparingTemplate(OrderStatusTemplate):
    status = OrderStatus.PREPARING.value
    title = "Food Being Prepared!"
    body_template = "Our chefs are now preparing your delicious order #{order_number}!"


class OrderReadyTemplate(OrderStatusTemplate):
    status = OrderStatus.READY.value
    title = "Order Ready for Collection!"
    body_template = "Order #{order_number} is ready! Please come and collect it."


class OrderCollectedTemplate(OrderStatusTemplate):
    status = OrderStatus.COLLECTED.value
    title = "Order Collected!"
    body_template = "Thank you for collecting order #{order_number}! Enjoy your meal!"
