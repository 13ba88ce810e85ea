"""Server-wide constants."""

PROJECT_NAME = "MyLife Companion API"

API_PREFIX = "/api"

SCHEMA_VERSION = "v1"
