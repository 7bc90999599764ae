"""Adapters: file formats around the core (JSON/CSV export)."""
