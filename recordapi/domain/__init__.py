"""Record types and domain errors."""
