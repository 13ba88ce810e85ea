"""Core building blocks shared by the server and the API client."""
