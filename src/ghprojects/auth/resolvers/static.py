"""Token given directly through ``GH_PROJECTS_TOKEN``."""

from __future__ import annotations

from dataclasses import dataclass

from ghprojects.auth.base import TokenResolver
from ghprojects.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str

    async def resolve(self) -> str:
        token = self.token.strip()
        if token:
            return token
        raise AuthenticationError("GH_PROJECTS_TOKEN is set but empty")
