"""Environment token resolver."""

from __future__ import annotations

import os

from ghprojects.auth.base import TokenResolver
from ghprojects.exceptions import AuthenticationError

_TOKEN_VARIABLES = ("GH_TOKEN", "GITHUB_TOKEN")


class EnvTokenResolver(TokenResolver):
    async def resolve(self) -> str:
        for name in _TOKEN_VARIABLES:
            token = (os.getenv(name) or "").strip()
            if token:
                return token
        raise AuthenticationError("GH_TOKEN or GITHUB_TOKEN is not set or empty")
