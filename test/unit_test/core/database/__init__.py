"""Unit tests for the database layer.

This package covers the SQLModel entities and the repositories built on them.
All tests run against in-memory SQLite, so no external database service is
needed.
"""
