"""Domain models and errors.

Why:
- Pure, immutable data structures (Pydantic v2) live here.
- The domain knows nothing about files, consoles or the CLI.
"""
