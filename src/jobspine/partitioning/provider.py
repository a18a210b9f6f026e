"""
Partition key provider - derive the job engine's default partitions at startup.

The job engine polls storage one partition at a time. Which partitions exist
follows from the record type hierarchy: every concrete trigger/instance type
gets one, and a type whose storage region is shared with concrete subtypes
gets a type-discriminating predicate so its query only picks up its own rows.

Manifesto:
    - **Run once:** keys are derived in the constructor, never recomputed
    - **Fail fast:** a missing catalog, missing bindings or an ambiguous
      type aborts engine bring-up
    - **Immutable output:** tuples of frozen keys, safe to share across threads

Architecture:
    ::

        TypeCatalog.list_types()
              │
              ▼
        flatten()  ──►  CoverageMap  ──►  build(bindings)
                                              │
                        ┌─────────────────────┴───────────────────┐
                        ▼                                         ▼
             trigger_partition_keys                   instance_partition_keys

Examples:
    >>> from jobspine.core.orm import SQLAlchemyTypeCatalog
    >>> provider = PartitionKeyProvider.from_settings(SQLAlchemyTypeCatalog.from_settings(Base))
    >>> [key.name for key in provider.trigger_partition_keys]
    ['EmailTrigger', 'ReportTrigger']

Tags:
    jobspine, partitioning, startup, job-engine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from jobspine.core.errors import MissingCatalogError
from jobspine.core.logging import get_logger
from jobspine.core.protocols import TypeCatalog
from jobspine.core.settings import JobStorageSettings
from jobspine.partitioning.bindings import AttributeBindings
from jobspine.partitioning.builder import build
from jobspine.partitioning.flattener import flatten
from jobspine.partitioning.types import DEFAULT_PREDICATE_TEMPLATE, PartitionKey

logger = get_logger(__name__)


class PartitionKeyProvider:
    """Default trigger and instance partition keys for a type catalog.

    Args:
        catalog: Source of record type descriptors
        bindings: Attribute bindings; defaults apply when omitted
        predicate_template: Template for type-discriminating predicates

    Raises:
        MissingCatalogError: ``catalog`` is ``None``
        InvalidCatalogError: Duplicate type names or cyclic supertypes
        ClassificationError: Raised by the catalog for ambiguous types
    """

    def __init__(
        self,
        catalog: TypeCatalog | None,
        bindings: AttributeBindings | None = None,
        predicate_template: str = DEFAULT_PREDICATE_TEMPLATE,
    ):
        if catalog is None:
            raise MissingCatalogError()

        coverage = flatten(catalog.list_types())
        self._trigger_keys, self._instance_keys = build(
            coverage,
            bindings if bindings is not None else AttributeBindings(),
            predicate_template,
        )
        logger.info(
            "partition_keys_built",
            trigger_keys=[key.name for key in self._trigger_keys],
            instance_keys=[key.name for key in self._instance_keys],
        )

    @classmethod
    def from_settings(
        cls,
        catalog: TypeCatalog | None,
        settings: JobStorageSettings | None = None,
    ) -> PartitionKeyProvider:
        """Create a provider using ``JOB_STORAGE_*`` settings for the bindings.

        ``ambiguity_policy`` is applied while the catalog classifies types, so
        pass it to the catalog (see ``SQLAlchemyTypeCatalog.from_settings``).
        """
        settings = settings or JobStorageSettings()
        return cls(catalog, settings.to_bindings(), settings.predicate_template)

    @property
    def trigger_partition_keys(self) -> tuple[PartitionKey, ...]:
        return self._trigger_keys

    @property
    def instance_partition_keys(self) -> tuple[PartitionKey, ...]:
        return self._instance_keys


__all__ = ["PartitionKeyProvider"]
