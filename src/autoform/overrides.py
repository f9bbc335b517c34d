"""Per-field UI overrides."""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .descriptors import FieldDescriptor, FieldUI

logger = logging.getLogger(__name__)


class FieldConfig(BaseModel):
    """UI settings a caller can force onto one top-level field."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    label: Optional[str] = None
    placeholder: Optional[str] = None
    description: Optional[str] = None
    unit: Optional[str] = None
    component: Any = None
    component_props: Optional[dict[str, Any]] = None
    section: Optional[str] = None
    order: Optional[int] = None
    hidden: Optional[bool] = None
    col_span: Optional[int] = None
    disabled: Optional[bool] = None

    def defined(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


OverrideMap = Mapping[str, Union[FieldConfig, Mapping[str, Any]]]


def normalize_overrides(overrides: Optional[OverrideMap]) -> dict[str, FieldConfig]:
    """Validate an override map into ``FieldConfig`` values.

    Raises:
        pydantic.ValidationError: If an entry holds unknown keys or values of
            the wrong type
    """
    if not overrides:
        return {}
    return {
        name: config if isinstance(config, FieldConfig) else FieldConfig.model_validate(config)
        for name, config in overrides.items()
    }


def layer_overrides(*maps: Optional[OverrideMap]) -> dict[str, FieldConfig]:
    """Stack override maps; for a shared name, later maps win per key."""
    layered: dict[str, FieldConfig] = {}
    for overrides in maps:
        for name, config in normalize_overrides(overrides).items():
            base = layered.get(name)
            layered[name] = config if base is None else base.model_copy(update=config.defined())
    return layered


def merge_ui(ui: FieldUI, config: FieldConfig) -> FieldUI:
    return ui.model_copy(update=config.defined())


def apply_overrides(
    descriptors: Iterable[FieldDescriptor], overrides: Optional[OverrideMap] = None
) -> list[FieldDescriptor]:
    """Merge override UI settings into matching top-level descriptors.

    Only the ``ui`` of a descriptor whose name is a key of ``overrides`` is
    touched: keys the override defines replace the inferred value, all other
    keys are kept. Children and item schemas are left as they are, and
    descriptors without an override are returned as the same objects.
    """
    configs = normalize_overrides(overrides)
    if not configs:
        return list(descriptors)

    merged = []
    for descriptor in descriptors:
        config = configs.get(descriptor.name)
        if config is None:
            merged.append(descriptor)
            continue

        logger.debug(f"Applying override to field {descriptor.name!r}")
        merged.append(descriptor.model_copy(update={"ui": merge_ui(descriptor.ui, config)}))

    unmatched = set(configs) - {descriptor.name for descriptor in merged}
    if unmatched:
        logger.debug(f"Overrides without a matching field: {sorted(unmatched)}")

    return merged
