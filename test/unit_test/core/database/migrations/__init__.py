"""Unit tests for the Alembic migration scripts."""
