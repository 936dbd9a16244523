"""Domain layer: pure helpers and view models.

This layer depends only on stdlib, pydantic and markupsafe.
It must never import from templating, infrastructure, commands, or config.
"""
