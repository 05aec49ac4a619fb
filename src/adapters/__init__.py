"""Adapters for consoles and files."""
