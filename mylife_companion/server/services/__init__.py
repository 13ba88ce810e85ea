"""
Server services.

Request dependencies (sessions, repositories, authentication guards) and the
domain rules shared by several routers.
"""
