"""
Protocol definitions for jobspine.

Architecture:
    ::

        protocols.py
        ├── JobTrigger    - marker: record type schedules jobs
        ├── JobInstance   - marker: record type is a runnable job instance
        └── TypeCatalog   - read-only source of record type descriptors

    Implementations:
        StaticTypeCatalog, ClassTypeCatalog   (jobspine.partitioning.catalog)
        SQLAlchemyTypeCatalog                 (jobspine.core.orm.catalog)

Guardrails:
    ❌ DON'T: Let the flattener introspect ORM classes directly
    ✅ DO: Put metamodel introspection behind a TypeCatalog

Tags:
    protocol, catalog, metamodel, jobspine, contracts

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from jobspine.partitioning.types import TypeDescriptor


class JobTrigger:
    """Capability marker for record types that schedule jobs."""


class JobInstance:
    """Capability marker for record types that are executable job instances."""


@runtime_checkable
class TypeCatalog(Protocol):
    """
    Read-only catalog of every record type known to the metamodel.

    Each descriptor carries its name, whether it is abstract, its supertype
    (itself taken from the catalog, or a type the catalog does not list) and
    its job category. The catalog is read once and never mutated.
    """

    def list_types(self) -> Iterable[TypeDescriptor]:
        """Return all known record types, concrete and abstract."""
        ...


__all__ = ["JobTrigger", "JobInstance", "TypeCatalog"]
