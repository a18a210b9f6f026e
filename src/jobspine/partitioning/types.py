"""Value types for partition key derivation.

* **TypeDescriptor** - one record type as the catalog reports it.
* **TypePredicate** - callable type-discriminator fragment.
* **PartitionKey** - the output unit handed to the job engine.

All three are frozen dataclasses: they are created during startup and shared,
unsynchronised, with the engine afterwards.

Tags:
    jobspine, partitioning, data-model

Doc-Types:
    api-reference, data-model
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from jobspine.core.enums import JobCategory, JobInstanceState
from jobspine.core.errors import InvalidConfigError

DEFAULT_PREDICATE_TEMPLATE = "TYPE({alias}) = {name}"

_SAMPLE_ALIAS = "__alias__"


def check_predicate_template(template: str) -> str:
    """Render ``template`` once with a sample alias and type name.

    Raises:
        InvalidConfigError: The template has unknown placeholders, is
            malformed or never references ``{alias}``
    """
    try:
        rendered = template.format(alias=_SAMPLE_ALIAS, name="Sample")
    except (KeyError, IndexError, AttributeError, ValueError) as exc:
        raise InvalidConfigError(
            "predicate_template",
            template,
            f"Cannot render predicate template {template!r}: {exc!r}",
        ) from exc
    if _SAMPLE_ALIAS not in rendered:
        raise InvalidConfigError(
            "predicate_template", template, "predicate_template must reference {alias}"
        )
    return template


@dataclass(frozen=True, eq=False)
class TypeDescriptor:
    """A record type known to the catalog.

    Descriptors compare by identity: two catalog entries are the same type
    only if they are the same object. ``supertype`` may point at a descriptor
    the catalog does not list (a framework base); the flattener stops there.
    """

    name: str
    is_abstract: bool = False
    supertype: TypeDescriptor | None = None
    category: JobCategory = JobCategory.NONE
    python_type: type | None = field(default=None, repr=False)

    @property
    def participates(self) -> bool:
        return self.category is not JobCategory.NONE

    @property
    def is_concrete_participant(self) -> bool:
        return not self.is_abstract and self.participates


CoverageMap = dict[TypeDescriptor, list[TypeDescriptor]]


@dataclass(frozen=True)
class TypePredicate:
    """Fragment asserting that the row at a query alias is exactly ``type_name``.

    >>> TypePredicate("EmailTrigger")("t")
    'TYPE(t) = EmailTrigger'
    """

    type_name: str
    template: str = DEFAULT_PREDICATE_TEMPLATE

    def __call__(self, alias: str) -> str:
        return self.template.format(alias=alias, name=self.type_name)


@dataclass(frozen=True)
class PartitionKey:
    """Queryable grouping descriptor for one representative record type.

    ``predicate`` is set iff ``covered_types`` holds more than the
    representative: the storage region for ``name`` then also contains rows
    of other concrete types, and the predicate narrows it back down.
    """

    name: str
    category: JobCategory
    id_attribute: str
    schedule_attribute: str
    last_execution_attribute: str
    partition_attribute: str
    state_attribute: str
    state_value_mapper: Callable[[JobInstanceState], Any]
    predicate: Callable[[str], str] | None = None
    covered_types: tuple[str, ...] = ()
    job_type: type | None = field(default=None, compare=False)

    def partition_predicate(self, alias: str) -> str | None:
        """Predicate fragment for ``alias``, or ``None`` when no narrowing is needed."""
        if self.predicate is None:
            return None
        return self.predicate(alias)

    def map_state(self, state: JobInstanceState) -> Any:
        return self.state_value_mapper(state)


__all__ = [
    "DEFAULT_PREDICATE_TEMPLATE",
    "check_predicate_template",
    "TypeDescriptor",
    "CoverageMap",
    "TypePredicate",
    "PartitionKey",
]
