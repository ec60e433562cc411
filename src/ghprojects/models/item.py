"""Project item models: item content and per-item field values."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, Field

# ------------------------------------------------------------------
# Item content
# ------------------------------------------------------------------


class _ContentBase(BaseModel):
    typename: ClassVar[str] = ""

    title: str = ""
    body: str = ""

    model_config = {"frozen": True}

    @property
    def type(self) -> str:
        return self.typename

    @property
    def number(self) -> int:
        return 0

    @property
    def repository(self) -> str:
        return ""


class DraftIssueContent(_ContentBase):
    typename: ClassVar[str] = "DraftIssue"

    id: str = ""


class RepositoryContent(_ContentBase):
    """Content backed by a repository: an issue or a pull request."""

    issue_number: int = 0
    repository_name: str = ""

    @property
    def number(self) -> int:
        return self.issue_number

    @property
    def repository(self) -> str:
        return self.repository_name


class IssueContent(RepositoryContent):
    typename: ClassVar[str] = "Issue"


class PullRequestContent(RepositoryContent):
    typename: ClassVar[str] = "PullRequest"


class EmptyContent(_ContentBase):
    """Content GitHub did not return, e.g. a redacted item."""

    raw_type: str = ""

    @property
    def type(self) -> str:
        return self.raw_type


ItemContent = DraftIssueContent | IssueContent | PullRequestContent | EmptyContent


# ------------------------------------------------------------------
# Field values
# ------------------------------------------------------------------


class _FieldValueBase(BaseModel):
    """A value set on an item, linked to its field by ID."""

    typename: ClassVar[str] = ""

    field_id: str = ""
    field_name: str = ""

    model_config = {"frozen": True}

    @abstractmethod
    def data(self) -> Any:
        """JSON-compatible projection of the value."""


class DateValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldDateValue"

    date: str = ""

    def data(self) -> Any:
        return self.date


class IterationValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldIterationValue"

    title: str = ""
    start_date: str = ""
    duration: int = 0

    def data(self) -> Any:
        return {"startDate": self.start_date, "duration": self.duration}


class NumberValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldNumberValue"

    number: float = 0.0

    def data(self) -> Any:
        if self.number.is_integer():
            return int(self.number)
        return self.number


class SingleSelectValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldSingleSelectValue"

    name: str = ""

    def data(self) -> Any:
        return self.name


class TextValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldTextValue"

    text: str = ""

    def data(self) -> Any:
        return self.text


class MilestoneValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldMilestoneValue"

    description: str = ""
    due_on: str = ""

    def data(self) -> Any:
        return {"description": self.description, "dueOn": self.due_on}


class LabelValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldLabelValue"

    labels: list[str] = Field(default_factory=list)

    def data(self) -> Any:
        return list(self.labels)


class PullRequestValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldPullRequestValue"

    urls: list[str] = Field(default_factory=list)

    def data(self) -> Any:
        return list(self.urls)


class RepositoryValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldRepositoryValue"

    url: str = ""

    def data(self) -> Any:
        return self.url


class UserValue(_FieldValueBase):
    typename: ClassVar[str] = "ProjectV2ItemFieldUserValue"

    logins: list[str] = Field(default_factory=list)

    def data(self) -> Any:
        return list(self.logins)


class ReviewerValue(_FieldValueBase):
    """Requested reviewers: team names and user logins, in API order."""

    typename: ClassVar[str] = "ProjectV2ItemFieldReviewerValue"

    reviewers: list[str] = Field(default_factory=list)

    def data(self) -> Any:
        return list(self.reviewers)


class UnknownValue(_FieldValueBase):
    raw_type: str = ""

    def data(self) -> Any:
        return None


FieldValue = (
    DateValue
    | IterationValue
    | NumberValue
    | SingleSelectValue
    | TextValue
    | MilestoneValue
    | LabelValue
    | PullRequestValue
    | RepositoryValue
    | UserValue
    | ReviewerValue
    | UnknownValue
)


# ------------------------------------------------------------------
# Items
# ------------------------------------------------------------------


class ProjectItem(BaseModel):
    """A row in a project: linked issue/pull request or draft issue."""

    id: str = ""
    content: ItemContent = Field(default_factory=EmptyContent)
    field_values: list[FieldValue] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def type(self) -> str:
        return self.content.type

    @property
    def title(self) -> str:
        return self.content.title

    @property
    def body(self) -> str:
        return self.content.body

    @property
    def number(self) -> int:
        """Issue or pull request number; 0 for draft issues."""
        return self.content.number

    @property
    def repository(self) -> str:
        """``owner/name`` of the backing repository; empty for draft issues."""
        return self.content.repository
