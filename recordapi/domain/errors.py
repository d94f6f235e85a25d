"""Lookup errors shared by the task and game services."""

from __future__ import annotations


class RecordNotFoundError(Exception):
    """Base class for id lookups that found nothing."""

    kind = "Record"

    def __init__(self, record_id: int):
        super().__init__(f"{self.kind} {record_id} not found")
        self.record_id = record_id
