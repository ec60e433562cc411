"""Project field models.

A project field is a closed union of variants. GitHub reports three GraphQL
types (``ProjectV2Field``, ``ProjectV2SingleSelectField`` and
``ProjectV2IterationField``); plain ``ProjectV2Field`` values are further split
by their ``dataType`` so callers can match on text, number, date and milestone
fields directly.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

COMMON_FIELD = "ProjectV2Field"
SINGLE_SELECT_FIELD = "ProjectV2SingleSelectField"
ITERATION_FIELD = "ProjectV2IterationField"


class _FieldBase(BaseModel):
    typename: ClassVar[str] = ""

    id: str = ""
    name: str = ""
    data_type: str = ""

    model_config = {"frozen": True}

    @property
    def type(self) -> str:
        return self.typename


class CommonField(_FieldBase):
    """A ``ProjectV2Field`` whose data type has no dedicated variant."""

    typename: ClassVar[str] = COMMON_FIELD


class TextField(CommonField):
    pass


class NumberField(CommonField):
    pass


class DateField(CommonField):
    pass


class MilestoneField(CommonField):
    pass


class SelectOption(BaseModel):
    id: str = ""
    name: str = ""

    model_config = {"frozen": True}


class SingleSelectField(_FieldBase):
    typename: ClassVar[str] = SINGLE_SELECT_FIELD

    options: list[SelectOption] = Field(default_factory=list)


class Iteration(BaseModel):
    id: str = ""
    title: str = ""
    start_date: str = ""
    duration: int = 0

    model_config = {"frozen": True}


class IterationField(_FieldBase):
    """An iteration field.

    ``iterations`` holds current and future iterations in chronological order;
    ``completed_iterations`` is kept in the order GitHub returns it. Renderers
    list completed iterations most-recent-first.
    """

    typename: ClassVar[str] = ITERATION_FIELD

    iterations: list[Iteration] = Field(default_factory=list)
    completed_iterations: list[Iteration] = Field(default_factory=list)


class UnknownField(_FieldBase):
    """A field whose GraphQL type this client does not model."""

    raw_type: str = ""

    @property
    def type(self) -> str:
        return self.raw_type


ProjectField = (
    TextField
    | NumberField
    | DateField
    | MilestoneField
    | CommonField
    | SingleSelectField
    | IterationField
    | UnknownField
)

COMMON_FIELD_VARIANTS: dict[str, type[CommonField]] = {
    "TEXT": TextField,
    "NUMBER": NumberField,
    "DATE": DateField,
    "MILESTONE": MilestoneField,
}
