"""Infrastructure layer — SQLite catalog store and the bulk importer.

This layer depends on stdlib, third-party libs (SQLAlchemy, httpx) and
the domain models it persists. It must never import from services,
commands, shell, or output.
"""
