"""Partition key builder - one key per participating representative type."""

from __future__ import annotations

from jobspine.core.enums import JobCategory
from jobspine.core.errors import MissingConfigError
from jobspine.core.logging import get_logger
from jobspine.partitioning.bindings import AttributeBindings, CategoryBindings
from jobspine.partitioning.types import (
    DEFAULT_PREDICATE_TEMPLATE,
    CoverageMap,
    PartitionKey,
    TypeDescriptor,
    TypePredicate,
    check_predicate_template,
)

logger = get_logger(__name__)


def _make_key(
    representative: TypeDescriptor,
    covered: list[TypeDescriptor],
    bindings: CategoryBindings,
    predicate_template: str,
) -> PartitionKey:
    # The representative's storage region also holds other concrete types.
    has_subtypes = any(t is not representative for t in covered)
    predicate = TypePredicate(representative.name, predicate_template) if has_subtypes else None
    return PartitionKey(
        name=representative.name,
        category=representative.category,
        id_attribute=bindings.id_attribute,
        schedule_attribute=bindings.schedule_attribute,
        last_execution_attribute=bindings.last_execution_attribute,
        partition_attribute=bindings.partition_attribute,
        state_attribute=bindings.state_attribute,
        state_value_mapper=bindings.state_value_mapper,
        predicate=predicate,
        covered_types=tuple(t.name for t in covered),
        job_type=representative.python_type,
    )


def build(
    coverage: CoverageMap,
    bindings: AttributeBindings | None,
    predicate_template: str = DEFAULT_PREDICATE_TEMPLATE,
) -> tuple[tuple[PartitionKey, ...], tuple[PartitionKey, ...]]:
    """Emit partition keys for every participating entry of a coverage map.

    Representatives that are neither triggers nor instances (non-abstract
    ancestors of participating types) only exist to carry coverage and are
    skipped.

    Args:
        coverage: Output of :func:`jobspine.partitioning.flattener.flatten`
        bindings: Attribute bindings for both categories
        predicate_template: ``str.format`` template with ``alias`` and ``name``

    Returns:
        ``(trigger_keys, instance_keys)``, each ordered by key name

    Raises:
        MissingConfigError: ``bindings`` is ``None``
        InvalidConfigError: ``predicate_template`` cannot be rendered
    """
    if bindings is None:
        raise MissingConfigError("attribute_bindings", "No attribute bindings given!")
    check_predicate_template(predicate_template)

    trigger_keys: list[PartitionKey] = []
    instance_keys: list[PartitionKey] = []
    for representative, covered in coverage.items():
        if representative.category is JobCategory.TRIGGER:
            trigger_keys.append(
                _make_key(representative, covered, bindings.trigger, predicate_template)
            )
        elif representative.category is JobCategory.INSTANCE:
            instance_keys.append(
                _make_key(representative, covered, bindings.instance, predicate_template)
            )
        else:
            logger.debug(
                "partition_key_skipped",
                type_name=representative.name,
                covered=[t.name for t in covered],
            )

    trigger_keys.sort(key=lambda k: k.name)
    instance_keys.sort(key=lambda k: k.name)
    return tuple(trigger_keys), tuple(instance_keys)


__all__ = ["build"]
