"""Owner resolution: selector flags to a concrete ``Owner``."""

from __future__ import annotations

import logging

from ghprojects.exceptions import NotFoundError
from ghprojects.github.client import GraphQLClient
from ghprojects.github.queries import OWNER_QUERIES, operation_name, root_key
from ghprojects.models.owner import Owner, OwnerSelector, OwnerType

_LOG = logging.getLogger(__name__)

_OWNER_NOUNS = {
    OwnerType.USER: "user",
    OwnerType.ORGANIZATION: "organization",
    OwnerType.VIEWER: "viewer",
}


async def resolve_owner(client: GraphQLClient, selector: OwnerSelector) -> Owner:
    """Resolve *selector* to an owner with its node ID.

    The selector is validated first, so a conflicting or missing selection
    fails before any request is sent.

    Raises:
        ConfigError: If zero or several owner selectors are set.
        NotFoundError: If the user or organization does not exist.
    """
    owner_type, login = selector.target()
    variables = {"login": login} if login is not None else {}
    data = await client.execute(
        OWNER_QUERIES[owner_type],
        variables,
        operation=operation_name(owner_type, "Owner"),
    )
    node = data.get(root_key(owner_type))
    if not isinstance(node, dict) or not node.get("id"):
        raise NotFoundError(f"could not find {_OWNER_NOUNS[owner_type]} {login or ''}".rstrip())

    owner = Owner(id=str(node["id"]), login=str(node.get("login") or login or ""), type=owner_type)
    _LOG.debug("Resolved %s owner %s", owner.type, owner.login)
    return owner
