"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) and the static country table.
- The domain knows nothing about the CLI, files or randomness.
"""
