"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete implementations satisfy.
- Inverts dependencies: the core depends on abstractions, not on globals.
"""
