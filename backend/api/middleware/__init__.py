"""API middleware and request-level dependencies."""
