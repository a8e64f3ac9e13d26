"""Ways of adding authorization to outgoing requests."""

from __future__ import annotations

from abc import ABC, abstractmethod

import httpx


class Authorizer(ABC):
    """Adds authorization to an HTTP request before it is sent."""

    @abstractmethod
    def add(self, request: httpx.Request) -> None:
        """Add authorization to ``request`` in place."""


class BearerAuthorizer(Authorizer):
    """Adds a bearer token to the Authorization header."""

    def __init__(self, token: str) -> None:
        self.token = token

    def add(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = f"Bearer {self.token}"