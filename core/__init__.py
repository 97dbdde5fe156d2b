"""Cross-cutting infrastructure: settings, time, logging and ORM models."""
