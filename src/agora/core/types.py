"""Core type definitions."""

from typing import NewType

# URL path for routing (e.g., "/app", "/app/users")
# Distinct from API resource paths like "/users" which are relative to the API base
URLPath = NewType("URLPath", str)
