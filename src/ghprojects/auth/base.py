"""Where the GraphQL client gets its bearer token."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenResolver(ABC):
    """Supplies the token sent with every GitHub request.

    ``GraphQLClient`` calls :meth:`resolve` once, right before its first
    request. A command rejected by local validation never reaches it.
    """

    @abstractmethod
    async def resolve(self) -> str:
        """Return a non-empty token or raise ``AuthenticationError``."""
