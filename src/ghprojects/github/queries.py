"""GraphQL query and mutation documents for the Projects v2 API.

Project-scoped queries exist once per owner kind (user, organization and
viewer). They share their selection through fragments and differ only in the
root field and in whether a ``$login`` variable is declared.
"""

from __future__ import annotations

from ghprojects.models.owner import OwnerType

# ------------------------------------------------------------------
# Fragments
# ------------------------------------------------------------------

PROJECT_FRAGMENT = """
fragment ProjectParts on ProjectV2 {
  id number title url shortDescription readme public closed
  owner {
    __typename
    ... on User { login }
    ... on Organization { login }
  }
}
"""

FIELD_FRAGMENT = """
fragment FieldParts on ProjectV2FieldConfiguration {
  __typename
  ... on ProjectV2Field { id name dataType }
  ... on ProjectV2SingleSelectField { id name dataType options { id name } }
  ... on ProjectV2IterationField {
    id name dataType
    configuration {
      iterations { id title startDate duration }
      completedIterations { id title startDate duration }
    }
  }
}
"""

ITEM_FRAGMENT = """
fragment ItemParts on ProjectV2Item {
  id
  content {
    __typename
    ... on DraftIssue { id title body }
    ... on Issue { title body number repository { nameWithOwner } }
    ... on PullRequest { title body number repository { nameWithOwner } }
  }
  fieldValues(first: 100) {
    nodes {
      __typename
      ... on ProjectV2ItemFieldDateValue { date field { ...FieldRef } }
      ... on ProjectV2ItemFieldIterationValue { title startDate duration field { ...FieldRef } }
      ... on ProjectV2ItemFieldNumberValue { number field { ...FieldRef } }
      ... on ProjectV2ItemFieldSingleSelectValue { name field { ...FieldRef } }
      ... on ProjectV2ItemFieldTextValue { text field { ...FieldRef } }
      ... on ProjectV2ItemFieldMilestoneValue { milestone { description dueOn } field { ...FieldRef } }
      ... on ProjectV2ItemFieldLabelValue { labels(first: 10) { nodes { name } } field { ...FieldRef } }
      ... on ProjectV2ItemFieldPullRequestValue { pullRequests(first: 10) { nodes { url } } field { ...FieldRef } }
      ... on ProjectV2ItemFieldRepositoryValue { repository { url } field { ...FieldRef } }
      ... on ProjectV2ItemFieldUserValue { users(first: 10) { nodes { login } } field { ...FieldRef } }
      ... on ProjectV2ItemFieldReviewerValue {
        reviewers(first: 10) {
          nodes {
            __typename
            ... on Team { name }
            ... on User { login }
          }
        }
        field { ...FieldRef }
      }
    }
  }
}

fragment FieldRef on ProjectV2FieldConfiguration {
  ... on ProjectV2FieldCommon { id name }
}
"""

# Totals for mutation payloads that return a whole project.
_PROJECT_COUNTS = "items(first: 0) { totalCount } fields(first: 0) { totalCount }"

# ------------------------------------------------------------------
# Owner-scoped queries
# ------------------------------------------------------------------

_OWNER_ROOTS: dict[OwnerType, tuple[str, str, str]] = {
    # owner type: (operation prefix, root field, extra variable declarations)
    OwnerType.USER: ("User", "user(login: $login)", "$login: String!"),
    OwnerType.ORGANIZATION: ("Org", "organization(login: $login)", "$login: String!"),
    OwnerType.VIEWER: ("Viewer", "viewer", ""),
}


def _owner_scoped(owner_type: OwnerType, name: str, variables: str, selection: str, fragments: str = "") -> str:
    prefix, root, login_var = _OWNER_ROOTS[owner_type]
    declared = ", ".join(v for v in (login_var, variables) if v)
    signature = f"({declared})" if declared else ""
    return f"query {prefix}{name}{signature} {{\n  {root} {{\n{selection}\n  }}\n}}\n{fragments}"


def operation_name(owner_type: OwnerType, name: str) -> str:
    """Operation name of an owner-scoped query, e.g. ``OrgProject``."""
    return f"{_OWNER_ROOTS[owner_type][0]}{name}"


def root_key(owner_type: OwnerType) -> str:
    """Key of the owner object in an owner-scoped query's ``data``."""
    return _OWNER_ROOTS[owner_type][1].split("(", 1)[0]


_PROJECT_SELECTION = """
    projectV2(number: $number) {
      ...ProjectParts
      items(first: $firstItems, after: $afterItems) {
        totalCount
        pageInfo { hasNextPage endCursor }
        nodes { ...ItemParts }
      }
      fields(first: $firstFields, after: $afterFields) {
        totalCount
        pageInfo { hasNextPage endCursor }
        nodes { ...FieldParts }
      }
    }"""

_PROJECT_VARIABLES = "$number: Int!, $firstItems: Int!, $afterItems: String, $firstFields: Int!, $afterFields: String"

_PROJECTS_SELECTION = """
    login
    projectsV2(first: $first, after: $after) {
      totalCount
      pageInfo { hasNextPage endCursor }
      nodes { id number title url shortDescription public closed }
    }"""

PROJECT_QUERIES: dict[OwnerType, str] = {
    owner_type: _owner_scoped(
        owner_type,
        "Project",
        _PROJECT_VARIABLES,
        _PROJECT_SELECTION,
        PROJECT_FRAGMENT + ITEM_FRAGMENT + FIELD_FRAGMENT,
    )
    for owner_type in OwnerType
}

PROJECTS_QUERIES: dict[OwnerType, str] = {
    owner_type: _owner_scoped(owner_type, "Projects", "$first: Int!, $after: String", _PROJECTS_SELECTION)
    for owner_type in OwnerType
}

OWNER_QUERIES: dict[OwnerType, str] = {
    owner_type: _owner_scoped(owner_type, "Owner", "", "    id\n    login") for owner_type in OwnerType
}

RESOURCE_ID = """
query IssueOrPullRequest($url: URI!) {
  resource(url: $url) {
    __typename
    ... on Issue { id }
    ... on PullRequest { id }
  }
}
"""

# ------------------------------------------------------------------
# Project mutations
# ------------------------------------------------------------------

CREATE_PROJECT = (
    """
mutation CreateProjectV2($input: CreateProjectV2Input!) {
  createProjectV2(input: $input) {
    projectV2 { ...ProjectParts %s }
  }
}
"""
    % _PROJECT_COUNTS
    + PROJECT_FRAGMENT
)

UPDATE_PROJECT = (
    """
mutation UpdateProjectV2($input: UpdateProjectV2Input!) {
  updateProjectV2(input: $input) {
    projectV2 { ...ProjectParts %s }
  }
}
"""
    % _PROJECT_COUNTS
    + PROJECT_FRAGMENT
)

COPY_PROJECT = (
    """
mutation CopyProjectV2($input: CopyProjectV2Input!) {
  copyProjectV2(input: $input) {
    projectV2 { ...ProjectParts %s }
  }
}
"""
    % _PROJECT_COUNTS
    + PROJECT_FRAGMENT
)

DELETE_PROJECT = (
    """
mutation DeleteProjectV2($input: DeleteProjectV2Input!) {
  deleteProjectV2(input: $input) {
    projectV2 { ...ProjectParts %s }
  }
}
"""
    % _PROJECT_COUNTS
    + PROJECT_FRAGMENT
)

# ------------------------------------------------------------------
# Field mutations
# ------------------------------------------------------------------

CREATE_FIELD = (
    """
mutation CreateField($input: CreateProjectV2FieldInput!) {
  createProjectV2Field(input: $input) {
    projectV2Field { ...FieldParts }
  }
}
"""
    + FIELD_FRAGMENT
)

UPDATE_FIELD = (
    """
mutation UpdateField($input: UpdateProjectV2FieldInput!) {
  updateProjectV2Field(input: $input) {
    projectV2Field { ...FieldParts }
  }
}
"""
    + FIELD_FRAGMENT
)

DELETE_FIELD = (
    """
mutation DeleteField($input: DeleteProjectV2FieldInput!) {
  deleteProjectV2Field(input: $input) {
    projectV2Field { ...FieldParts }
  }
}
"""
    + FIELD_FRAGMENT
)

# ------------------------------------------------------------------
# Item mutations
# ------------------------------------------------------------------

ADD_ITEM = (
    """
mutation AddItem($input: AddProjectV2ItemByIdInput!) {
  addProjectV2ItemById(input: $input) {
    item { ...ItemParts }
  }
}
"""
    + ITEM_FRAGMENT
)

CREATE_DRAFT_ITEM = (
    """
mutation CreateDraftItem($input: AddProjectV2DraftIssueInput!) {
  addProjectV2DraftIssue(input: $input) {
    projectItem { ...ItemParts }
  }
}
"""
    + ITEM_FRAGMENT
)

UPDATE_DRAFT_ITEM = """
mutation EditDraftIssueItem($input: UpdateProjectV2DraftIssueInput!) {
  updateProjectV2DraftIssue(input: $input) {
    draftIssue { id title body }
  }
}
"""

ARCHIVE_ITEM = (
    """
mutation ArchiveProjectItem($input: ArchiveProjectV2ItemInput!) {
  archiveProjectV2Item(input: $input) {
    item { ...ItemParts }
  }
}
"""
    + ITEM_FRAGMENT
)

UNARCHIVE_ITEM = (
    """
mutation UnarchiveProjectItem($input: UnarchiveProjectV2ItemInput!) {
  unarchiveProjectV2Item(input: $input) {
    item { ...ItemParts }
  }
}
"""
    + ITEM_FRAGMENT
)

DELETE_ITEM = """
mutation DeleteProjectItem($input: DeleteProjectV2ItemInput!) {
  deleteProjectV2Item(input: $input) {
    deletedItemId
  }
}
"""
