"""Audit store registry: process-wide audit store handle.

Defaults to the repository-backed store, which writes through the active
protean domain. Tests and alternative backends install their own with
``set_audit_store``.
"""

from order_updates.audit.store_port import AuditStorePort

_audit_store: AuditStorePort | None = None


def get_audit_store() -> AuditStorePort:
    """Return the configured audit store (created on first use)."""
    global _audit_store
    if _audit_store is None:
        from order_updates.audit.repository_store import RepositoryAuditStore

        _audit_store = RepositoryAuditStore()

    return _audit_store


def set_audit_store(store: AuditStorePort) -> None:
    """Install the audit store used by the event handlers."""
    global _audit_store
    if not isinstance(store, AuditStorePort):
        raise ValueError(f"Not an audit store: {store!r}")
    _audit_store = store


def reset_audit_store():
    """Drop the audit store singleton (useful for testing)."""
    global _audit_store
    _audit_store = None
