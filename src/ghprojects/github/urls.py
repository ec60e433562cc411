"""Web (browser) URLs for projects."""

from __future__ import annotations

from ghprojects.config import DEFAULT_HOSTNAME
from ghprojects.models.owner import OwnerType

CLOSED_QUERY = "?query=is%3Aclosed"


def _owner_path(owner_type: OwnerType | str, login: str) -> str:
    kind = "orgs" if owner_type in (OwnerType.ORGANIZATION, "Organization") else "users"
    return f"{kind}/{login}"


def projects_url(owner_type: OwnerType | str, login: str, *, closed: bool = False, hostname: str = DEFAULT_HOSTNAME) -> str:
    """Page listing the projects of an owner; closed ones with *closed*."""
    url = f"https://{hostname}/{_owner_path(owner_type, login)}/projects"
    return url + CLOSED_QUERY if closed else url


def project_url(owner_type: OwnerType | str, login: str, number: int, *, hostname: str = DEFAULT_HOSTNAME) -> str:
    return f"https://{hostname}/{_owner_path(owner_type, login)}/projects/{number}"
