"""Web-layer services."""
