"""
Core utilities shared across the record services.

This package hosts configuration, logging setup, the CORS policy, the
StoreGuard that serializes access to the database, and the FastAPI bootstrap
used by both apps.
"""
