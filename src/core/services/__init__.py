"""Services that orchestrate domain objects.

Why:
- Keeps lifecycle and the demo flow out of the CLI layer.
"""
