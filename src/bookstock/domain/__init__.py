"""Domain layer — the Book record and import candidates.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
