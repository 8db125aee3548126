"""Shared BDD fixtures and step definitions for the Order Updates domain."""

import pytest
from order_updates.audit.fake_store import FakeAuditStore
from order_updates.channel.fake_push import FakePushAdapter
from order_updates.order.snapshot import OrderSnapshot
from pytest_bdd import given, parsers, then

DEVICE_TOKEN = "bdd-device-token-0123456789-abcdefghij"


class FixedIdPushClient(FakePushAdapter):
    """Fake adapter that answers every send with the same message id."""

    def __init__(self, message_id):
        super().__init__()
        self.message_id = message_id

    def send(self, message: dict) -> str:
        self.sent_pushes.append(message)
        return self.message_id


@pytest.fixture()
def push_client():
    return FakePushAdapter()


@pytest.fixture()
def audit_store():
    return FakeAuditStore()


@pytest.fixture()
def outcome():
    """Container for the orchestrator's result."""
    return {"value": None}


# ---------------------------------------------------------------------------
# Given steps: orders
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('an order "{order_id}" changing from "{from_status}" to "{to_status}" with order number "{number}"'),
    target_fixture="update",
)
def order_update(order_id, from_status, to_status, number):
    return {
        "order_id": order_id,
        "before": OrderSnapshot(order_id=order_id, status=from_status, order_number=number, device_token=DEVICE_TOKEN),
        "after": OrderSnapshot(order_id=order_id, status=to_status, order_number=number, device_token=DEVICE_TOKEN),
    }


@given(
    parsers.cfparse('an order "{order_id}" without a device changing from "{from_status}" to "{to_status}"'),
    target_fixture="update",
)
def order_update_without_device(order_id, from_status, to_status):
    return {
        "order_id": order_id,
        "before": OrderSnapshot(order_id=order_id, status=from_status),
        "after": OrderSnapshot(order_id=order_id, status=to_status),
    }


# ---------------------------------------------------------------------------
# Given steps: push client
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the push client returns message id "{message_id}"'), target_fixture="push_client")
def push_client_returning(message_id):
    return FixedIdPushClient(message_id)


@given(parsers.cfparse('the push client rejects messages with "{reason}"'))
def push_client_rejecting(push_client, reason):
    push_client.configure(should_succeed=False, failure_reason=reason)


# ---------------------------------------------------------------------------
# Then steps: push
# ---------------------------------------------------------------------------
@then(parsers.cfparse('a push titled "{title}" is sent'))
def push_titled(push_client, title):
    assert len(push_client.sent_pushes) == 1
    assert push_client.sent_pushes[0]["notification"]["title"] == title


@then(parsers.cfparse('the push body is "{body}"'))
def push_body(push_client, body):
    assert push_client.sent_pushes[0]["notification"]["body"] == body


@then("no push is sent")
def no_push(push_client):
    assert push_client.sent_pushes == []


# ---------------------------------------------------------------------------
# Then steps: audit trail
# ---------------------------------------------------------------------------
def _only_record(audit_store):
    records = audit_store.documents("notifications")
    assert len(records) == 1, f"Expected exactly one audit record, found {len(records)}"
    return records[0]


@then(parsers.cfparse('the audit record has status "{status}", sent "{sent}" and type "{record_type}"'))
def audit_record_summary(audit_store, status, sent, record_type):
    record = _only_record(audit_store)
    assert record["status"] == status
    assert record["sent"] is (sent == "true")
    assert record["type"] == record_type


@then(parsers.cfparse('the audit record has message id "{message_id}"'))
def audit_record_message_id(audit_store, message_id):
    assert _only_record(audit_store)["messageId"] == message_id


@then(parsers.cfparse('the audit record has error "{error}"'))
def audit_record_error(audit_store, error):
    assert _only_record(audit_store)["error"] == error


@then("the audit record has no delivery details")
def audit_record_without_details(audit_store):
    record = _only_record(audit_store)
    for key in ("title", "body", "messageId", "deviceToken"):
        assert key not in record


@then("no audit record is written")
def no_audit_record(audit_store):
    assert audit_store.documents("notifications") == []
