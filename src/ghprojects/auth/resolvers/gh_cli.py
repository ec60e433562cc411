"""Token stored by the GitHub CLI (``gh auth token``)."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from ghprojects.auth.base import TokenResolver
from ghprojects.config import DEFAULT_HOSTNAME
from ghprojects.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


def _login_hint(hostname: str) -> str:
    return f"run `gh auth login --hostname {hostname} --scopes project` or set GH_TOKEN"


@dataclass(frozen=True)
class GhCliTokenResolver(TokenResolver):
    """Asks ``gh`` for the token it keeps for *hostname*.

    A missing binary, a non-zero exit and blank output all end in an
    ``AuthenticationError`` that says how to log in.
    """

    hostname: str = DEFAULT_HOSTNAME

    async def resolve(self) -> str:
        _LOG.debug("Reading token for %s from gh", self.hostname)
        try:
            process = await asyncio.create_subprocess_exec(
                "gh",
                "auth",
                "token",
                "--hostname",
                self.hostname,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise AuthenticationError(f"cannot run gh ({exc}); {_login_hint(self.hostname)}") from exc

        stdout, stderr = await process.communicate()
        token = stdout.decode(errors="replace").strip()
        if process.returncode == 0 and token:
            return token

        details = stderr.decode(errors="replace").strip() or "gh printed no token"
        raise AuthenticationError(f"no gh login for {self.hostname}: {details}; {_login_hint(self.hostname)}")
