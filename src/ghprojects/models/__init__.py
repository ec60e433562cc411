"""Domain models for ghprojects.

Re-exports all public model classes for convenient access::

    from ghprojects.models import Owner, Project, ProjectItem
"""

from ghprojects.models.field import (
    CommonField,
    DateField,
    Iteration,
    IterationField,
    MilestoneField,
    NumberField,
    ProjectField,
    SelectOption,
    SingleSelectField,
    TextField,
    UnknownField,
)
from ghprojects.models.item import (
    DateValue,
    DraftIssueContent,
    EmptyContent,
    FieldValue,
    IssueContent,
    ItemContent,
    IterationValue,
    LabelValue,
    MilestoneValue,
    NumberValue,
    ProjectItem,
    PullRequestContent,
    PullRequestValue,
    RepositoryContent,
    RepositoryValue,
    ReviewerValue,
    SingleSelectValue,
    TextValue,
    UnknownValue,
    UserValue,
)
from ghprojects.models.owner import VIEWER_ALIAS, Owner, OwnerSelector, OwnerType
from ghprojects.models.project import Project, ProjectSummary

__all__ = [
    "VIEWER_ALIAS",
    "CommonField",
    "DateField",
    "DateValue",
    "DraftIssueContent",
    "EmptyContent",
    "FieldValue",
    "IssueContent",
    "ItemContent",
    "Iteration",
    "IterationField",
    "IterationValue",
    "LabelValue",
    "MilestoneField",
    "MilestoneValue",
    "NumberField",
    "NumberValue",
    "Owner",
    "OwnerSelector",
    "OwnerType",
    "Project",
    "ProjectField",
    "ProjectItem",
    "ProjectSummary",
    "PullRequestContent",
    "PullRequestValue",
    "RepositoryContent",
    "RepositoryValue",
    "ReviewerValue",
    "SelectOption",
    "SingleSelectField",
    "TextField",
    "TextValue",
    "UnknownField",
    "UnknownValue",
    "UserValue",
]
