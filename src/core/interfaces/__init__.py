"""Core interfaces.

Why:
- Defines the structural contracts (Protocol) that adapters accept.
"""
