"""Attribute bindings handed through to every partition key.

The job engine builds its storage queries from attribute *names* and a state
value mapper. Neither is interpreted here: they are validated for shape only
and copied onto the keys of the matching category.

Named state-value mappers
─────────────────────────
identity   : JobInstanceState itself (default)
name       : ``state.name``         e.g. ``"DONE"``
value      : ``state.value``
ordinal    : declaration index      e.g. ``1`` for DONE
module:attr: any importable callable
"""

from __future__ import annotations

import importlib
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from jobspine.core.enums import JobInstanceState
from jobspine.core.errors import InvalidConfigError

StateValueMapper = Callable[[JobInstanceState], Any]


def identity_state(state: JobInstanceState) -> Any:
    return state


def state_name(state: JobInstanceState) -> Any:
    return state.name


def state_value(state: JobInstanceState) -> Any:
    return state.value


def state_ordinal(state: JobInstanceState) -> Any:
    return state.ordinal


NAMED_STATE_MAPPERS: dict[str, StateValueMapper] = {
    "identity": identity_state,
    "name": state_name,
    "value": state_value,
    "ordinal": state_ordinal,
}


def resolve_state_mapper(spec: str | StateValueMapper | None) -> StateValueMapper:
    """Resolve a mapper given by name, import path or as a callable.

    Raises:
        InvalidConfigError: Unknown name, unimportable path or non-callable target
    """
    if spec is None:
        return identity_state
    if callable(spec):
        return spec
    if spec in NAMED_STATE_MAPPERS:
        return NAMED_STATE_MAPPERS[spec]
    if ":" not in spec:
        raise InvalidConfigError(
            "state_value_mapper",
            spec,
            f"Unknown state value mapper {spec!r}; use one of "
            f"{sorted(NAMED_STATE_MAPPERS)} or 'module:attribute'",
        )

    module_name, _, attr = spec.partition(":")
    try:
        target = getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as exc:
        raise InvalidConfigError(
            "state_value_mapper", spec, f"Cannot import state value mapper {spec!r}"
        ) from exc
    if not callable(target):
        raise InvalidConfigError(
            "state_value_mapper", spec, f"State value mapper {spec!r} is not callable"
        )
    return target


class CategoryBindings(BaseModel):
    """Attribute names and state mapping for one job category.

    ``partition_attribute`` falls back to ``id_attribute`` when unset.
    """

    model_config = ConfigDict(frozen=True)

    id_attribute: str = "id"
    schedule_attribute: str = "scheduleTime"
    last_execution_attribute: str = "lastExecutionTime"
    partition_attribute: str = "id"
    state_attribute: str = "state"
    state_value_mapper: StateValueMapper = identity_state

    @model_validator(mode="before")
    @classmethod
    def _default_partition_attribute(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("partition_attribute") is None:
            data = dict(data)
            data["partition_attribute"] = data.get("id_attribute") or "id"
        return data

    @field_validator("state_value_mapper", mode="before")
    @classmethod
    def _resolve_mapper(cls, value: Any) -> Any:
        return resolve_state_mapper(value)


class AttributeBindings(BaseModel):
    """Bindings for both categories, as supplied by the configuration source."""

    model_config = ConfigDict(frozen=True)

    trigger: CategoryBindings = CategoryBindings()
    instance: CategoryBindings = CategoryBindings()


__all__ = [
    "StateValueMapper",
    "NAMED_STATE_MAPPERS",
    "identity_state",
    "resolve_state_mapper",
    "CategoryBindings",
    "AttributeBindings",
]
