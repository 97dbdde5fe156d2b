"""Concrete adapters for mail delivery and the user store."""
