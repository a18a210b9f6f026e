"""
Hierarchy flattener - collapse a record type hierarchy into coverage lists.

Every concrete participating type (a non-abstract trigger or instance type)
needs its own partition key. When such a type has non-abstract ancestors, a
query against any of those ancestors also returns its rows, so each
non-abstract ancestor must know which concrete participating types live
beneath it. Abstract types never become keys and are transparent for
coverage: the walk passes through them.

Architecture:
    ::

        catalog (list_types)
              │
              ▼
        ┌───────────────────────────────────────────────┐
        │ 1. index by name (duplicates rejected)        │
        │ 2. each concrete participant t starts {t}     │
        │ 3. climb supertype chain of t:                │
        │      abstract      → pass through             │
        │      non-abstract  → add t to ancestor's set  │
        │      unknown/None  → stop                     │
        │ 4. read sets off in catalog order             │
        └───────────────────────────────────────────────┘
              │
              ▼
        CoverageMap  representative → [covered concrete types]

    Each leaf contributes to its ancestors independently and the sets are
    only read once all leaves have climbed, so which types each
    representative covers does not depend on the order in which the catalog
    lists its types. Only list order follows the catalog.

Examples:
    >>> root = TypeDescriptor("Job", is_abstract=True)
    >>> mail = TypeDescriptor("Mail", supertype=root, category=JobCategory.TRIGGER)
    >>> digest = TypeDescriptor("Digest", supertype=mail, category=JobCategory.TRIGGER)
    >>> coverage = flatten([root, mail, digest])
    >>> [t.name for t in coverage[mail]]
    ['Mail', 'Digest']
    >>> [t.name for t in coverage[digest]]
    ['Digest']

Tags:
    jobspine, partitioning, hierarchy, inheritance

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Iterable

from jobspine.core.enums import JobCategory
from jobspine.core.errors import ClassificationError, InvalidCatalogError
from jobspine.core.logging import get_logger
from jobspine.partitioning.types import CoverageMap, TypeDescriptor

logger = get_logger(__name__)


def _index_catalog(all_types: Iterable[TypeDescriptor]) -> dict[str, TypeDescriptor]:
    index: dict[str, TypeDescriptor] = {}
    for descriptor in all_types:
        known = index.get(descriptor.name)
        if known is not None and known is not descriptor:
            raise InvalidCatalogError(
                descriptor.name, f"Duplicate type name in catalog: {descriptor.name}"
            )
        index[descriptor.name] = descriptor
    return index


def _in_catalog(index: dict[str, TypeDescriptor], descriptor: TypeDescriptor) -> bool:
    return index.get(descriptor.name) is descriptor


def _ancestors(
    index: dict[str, TypeDescriptor], descriptor: TypeDescriptor
) -> Iterable[TypeDescriptor]:
    """Yield supertypes of ``descriptor`` that belong to the catalog, nearest first."""
    seen = {descriptor.name}
    current = descriptor.supertype
    while current is not None and _in_catalog(index, current):
        if current.name in seen:
            raise InvalidCatalogError(
                descriptor.name,
                f"Supertype chain of {descriptor.name} is cyclic at {current.name}",
            ).with_context(supertype=current.name)
        seen.add(current.name)
        yield current
        current = current.supertype


def flatten(all_types: Iterable[TypeDescriptor]) -> CoverageMap:
    """Build the coverage map for a complete type catalog.

    Args:
        all_types: Every known record type, concrete and abstract

    Returns:
        Mapping from each non-abstract type that participates or has a
        participating descendant to the concrete participating types it
        covers, itself first when it participates.

    Raises:
        InvalidCatalogError: Duplicate names or a cyclic supertype chain
        ClassificationError: A participating type has a non-abstract
            ancestor of the other category
    """
    index = _index_catalog(all_types)
    order = {name: position for position, name in enumerate(index)}

    coverage_sets: dict[TypeDescriptor, set[TypeDescriptor]] = {}
    for descriptor in index.values():
        if not descriptor.is_concrete_participant:
            continue
        coverage_sets.setdefault(descriptor, set()).add(descriptor)
        for ancestor in _ancestors(index, descriptor):
            if ancestor.is_abstract:
                continue
            if ancestor.category not in (descriptor.category, JobCategory.NONE):
                raise ClassificationError(
                    f"Type {descriptor.name} is a job {descriptor.category.value} but "
                    f"extends job {ancestor.category.value} {ancestor.name}"
                ).with_context(type_name=descriptor.name, supertype=ancestor.name)
            coverage_sets.setdefault(ancestor, set()).add(descriptor)

    coverage: CoverageMap = {}
    for representative in sorted(coverage_sets, key=lambda t: order[t.name]):
        covered = sorted(coverage_sets[representative], key=lambda t: order[t.name])
        if representative in coverage_sets[representative]:
            covered.remove(representative)
            covered.insert(0, representative)
        coverage[representative] = covered

    logger.debug(
        "hierarchy_flattened",
        types=len(index),
        representatives=len(coverage),
        shared=sum(1 for covered in coverage.values() if len(covered) > 1),
    )
    return coverage


__all__ = ["flatten"]
