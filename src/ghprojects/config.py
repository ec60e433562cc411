"""Client configuration loading and validation."""

from __future__ import annotations

import os
from collections.abc import Mapping

import pydantic
from pydantic import BaseModel, Field, model_validator

from ghprojects.exceptions import ConfigError

DEFAULT_HOSTNAME = "github.com"
DEFAULT_TIMEOUT = 5.0

_AUTH_MODES = frozenset({"gh-cli", "env", "token"})


class ClientConfig(BaseModel):
    hostname: str = DEFAULT_HOSTNAME
    auth: str = "gh-cli"
    token: str | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> ClientConfig:
        if self.auth not in _AUTH_MODES:
            raise ValueError("auth must be one of: gh-cli, env, token")
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        return self

    @property
    def graphql_url(self) -> str:
        """GraphQL endpoint for the configured host.

        github.com is served from ``api.github.com``; Enterprise Server hosts
        expose the API under ``/api/graphql`` on the host itself.
        """
        if self.hostname == DEFAULT_HOSTNAME:
            return "https://api.github.com/graphql"
        return f"https://{self.hostname}/api/graphql"


def load_config(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """Build a :class:`ClientConfig` from environment variables.

    Recognised variables: ``GH_HOST``, ``GH_PROJECTS_AUTH``,
    ``GH_PROJECTS_TIMEOUT``. When no auth mode is requested explicitly but
    ``GH_TOKEN``/``GITHUB_TOKEN`` is set, the ``env`` resolver is used.

    Raises:
        ConfigError: If the resulting configuration is invalid.
    """
    env = os.environ if environ is None else environ

    payload: dict[str, object] = {}
    hostname = (env.get("GH_HOST") or "").strip()
    if hostname:
        payload["hostname"] = hostname

    auth = (env.get("GH_PROJECTS_AUTH") or "").strip()
    if auth:
        payload["auth"] = auth
    elif (env.get("GH_TOKEN") or env.get("GITHUB_TOKEN") or "").strip():
        payload["auth"] = "env"

    if auth == "token":
        payload["token"] = env.get("GH_PROJECTS_TOKEN")

    timeout = (env.get("GH_PROJECTS_TIMEOUT") or "").strip()
    if timeout:
        payload["timeout"] = timeout

    try:
        return ClientConfig.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
