from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import FieldType
from .labels import humanize


class _Model(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FieldConstraints(_Model):
    min: Union[int, float, None] = None
    max: Union[int, float, None] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    integer: Optional[bool] = None
    email: Optional[bool] = None


class FieldUI(_Model):
    label: Optional[str] = None
    description: Optional[str] = None
    unit: Optional[str] = None
    section: Optional[str] = None
    placeholder: Optional[str] = None
    component: Any = None
    component_props: Optional[dict[str, Any]] = None
    order: Optional[int] = None
    hidden: Optional[bool] = None
    col_span: Optional[int] = None
    disabled: Optional[bool] = None


class FieldOption(_Model):
    label: str
    value: Any


class FieldDescriptor(_Model):
    name: str
    path: tuple[Union[str, int], ...]
    type: FieldType
    required: bool
    constraints: FieldConstraints = Field(default_factory=FieldConstraints)
    ui: FieldUI = Field(default_factory=FieldUI)
    options: Optional[list[FieldOption]] = None
    children: Optional[list[FieldDescriptor]] = None
    item_schema: Optional[list[FieldDescriptor]] = None

    @property
    def display_label(self) -> str:
        """Label to render, falling back to the humanized field name."""
        return self.ui.label or humanize(self.name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, leaving out unset slots."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


FieldDescriptor.model_rebuild()
