"""Project owner models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from ghprojects.exceptions import ConfigError, ValidationError

VIEWER_ALIAS = "@me"


class OwnerType(StrEnum):
    USER = "USER"
    ORGANIZATION = "ORGANIZATION"
    VIEWER = "VIEWER"


class Owner(BaseModel):
    """A resolved project owner."""

    id: str
    login: str
    type: OwnerType

    model_config = {"frozen": True}


class OwnerSelector(BaseModel):
    """Owner selection as given on the command line.

    Exactly one of ``user``, ``org`` or ``me`` must be set. ``user="@me"``
    selects the viewer, the same as ``me=True``.
    """

    user: str | None = None
    org: str | None = None
    me: bool = False
    flag_prefix: str = ""

    model_config = {"frozen": True}

    def _flags(self) -> str:
        p = self.flag_prefix
        return f"--{p}user, --{p}org or --{p}me"

    def target(self) -> tuple[OwnerType, str | None]:
        """Return the owner type and login this selector addresses.

        The login is ``None`` for the viewer.

        Raises:
            ConfigError: If zero or more than one selector is set.
            ValidationError: If a login is blank.
        """
        chosen = [name for name, value in (("user", self.user), ("org", self.org)) if value is not None]
        if self.me:
            chosen.append("me")
        if not chosen:
            raise ConfigError(f"one of {self._flags()} is required")
        if len(chosen) > 1:
            raise ConfigError(f"only one of {self._flags()} may be set")

        if self.me:
            return OwnerType.VIEWER, None
        if self.user is not None:
            login = self.user.strip()
            if login == VIEWER_ALIAS:
                return OwnerType.VIEWER, None
            if not login:
                raise ValidationError(f"--{self.flag_prefix}user must not be empty")
            return OwnerType.USER, login
        login = (self.org or "").strip()
        if not login:
            raise ValidationError(f"--{self.flag_prefix}org must not be empty")
        return OwnerType.ORGANIZATION, login
