"""NotificationPayload value object: platform-agnostic push content.

Carries the title/body shown on the device, the data block the app reads
when the push is opened, and the Android/APNs delivery hints. The hints are
fixed and handed to the push client as-is.
"""

from protean.fields import String, Text

from order_updates.domain import order_updates

ORDER_UPDATE_TYPE = "order_update"

ANDROID_NOTIFICATION_HINTS = {
    "icon": "ic_launcher",
    "color": "#DC143C",
    "sound": "default",
    "channelId": "order_updates",
    "priority": "high",
}


@order_updates.value_object
class NotificationPayload:
    title = Text(required=True, sanitize=False)
    body = Text(required=True, sanitize=False)
    order_id = String(required=True, max_length=255, sanitize=False)
    status = Text(sanitize=False)
    order_number = Text(required=True, sanitize=False)

    @property
    def data(self) -> dict:
        return {
            "orderId": self.order_id,
            "status": self.status,
            "type": ORDER_UPDATE_TYPE,
            "orderNumber": self.order_number,
        }

    @property
    def android(self) -> dict:
        return {"notification": dict(ANDROID_NOTIFICATION_HINTS)}

    @property
    def apns(self) -> dict:
        return {
            "payload": {
                "aps": {
                    "alert": {"title": self.title, "body": self.body},
                    "sound": "default",
                    "badge": 1,
                },
            },
        }

    def to_message(self, device_token: str) -> dict:
        """Render the push client request addressed to one device."""
        return {
            "token": device_token,
            "notification": {"title": self.title, "body": self.body},
            "data": self.data,
            "android": self.android,
            "apns": self.apns,
        }
