"""
MyLife Companion.

Backend for a personal life-management companion: task tracking, calendar
scheduling, health-metric logging and a scripted emotional-support chat,
exposed as a JWT-protected REST API.
"""

__version__ = "1.0.0"
