"""
Models shared across the application.

- domain/: Domain enums and vocabulary
- io/: Pydantic request and response schemas for the REST API
"""
