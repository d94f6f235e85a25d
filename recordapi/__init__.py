"""HTTP record service (tasks/users or games) backed by a JSON snapshot file."""

__version__ = "0.1.0"
