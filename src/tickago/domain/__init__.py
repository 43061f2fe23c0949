"""Domain layer: parsing, calendar arithmetic, and relative formatting.

This layer depends only on stdlib, pydantic, and python-dateutil.
It must never import from services, output, commands, or config.
"""
