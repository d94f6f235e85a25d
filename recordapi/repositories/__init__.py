"""
Persistence adapters.

``record_store`` and ``database`` hold the in-memory state; ``json_storage``
turns it into the on-disk snapshot and back. Services go through
``core.guard.StoreGuard`` instead of touching these directly.
"""
