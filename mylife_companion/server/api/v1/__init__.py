"""Version 1 REST routers, mounted under ``/api``."""
