"""Core services: checksum, formatting, generation and validation."""
