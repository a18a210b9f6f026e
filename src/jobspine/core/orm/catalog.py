"""Type catalog backed by a SQLAlchemy declarative registry.

Reads the live metamodel: one descriptor per mapped class of the registry,
with ``mapper.inherits`` as the supertype. A supertype mapped in a different
registry is described but not listed, so the flattener stops there.

Tags:
    jobspine, orm, sqlalchemy, metamodel, catalog

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Mapper, registry as Registry

from jobspine.core.enums import AmbiguityPolicy
from jobspine.core.errors import MissingCatalogError
from jobspine.core.logging import get_logger
from jobspine.core.protocols import JobInstance, JobTrigger
from jobspine.core.settings import JobStorageSettings
from jobspine.partitioning.catalog import is_abstract_type
from jobspine.partitioning.classification import classify
from jobspine.partitioning.types import TypeDescriptor

logger = get_logger(__name__)


class SQLAlchemyTypeCatalog:
    """Catalog over every mapper of a declarative base or registry.

    Args:
        base: Declarative base class (``JobSpineBase`` subclass) or a
            :class:`sqlalchemy.orm.registry`
        policy: Resolution for classes carrying both markers

    Raises:
        MissingCatalogError: ``base`` is ``None`` or carries no registry
    """

    def __init__(self, base: Any, policy: AmbiguityPolicy = AmbiguityPolicy.REJECT):
        if base is None:
            raise MissingCatalogError("No declarative base or registry given!")
        registry = base if isinstance(base, Registry) else getattr(base, "registry", None)
        if not isinstance(registry, Registry):
            raise MissingCatalogError(f"{base!r} has no SQLAlchemy registry")
        self._registry = registry
        self._policy = policy

    @classmethod
    def from_settings(
        cls, base: Any, settings: JobStorageSettings | None = None
    ) -> SQLAlchemyTypeCatalog:
        """Create a catalog using ``JOB_STORAGE_AMBIGUITY_POLICY``."""
        settings = settings or JobStorageSettings()
        return cls(base, policy=settings.ambiguity_policy)

    def _describe(
        self, mapper: Mapper[Any], described: dict[Mapper[Any], TypeDescriptor]
    ) -> TypeDescriptor:
        if mapper in described:
            return described[mapper]
        cls = mapper.class_
        name = cls.__name__
        supertype = (
            self._describe(mapper.inherits, described) if mapper.inherits is not None else None
        )
        described[mapper] = TypeDescriptor(
            name=name,
            is_abstract=is_abstract_type(cls),
            supertype=supertype,
            category=classify(
                name,
                issubclass(cls, JobTrigger),
                issubclass(cls, JobInstance),
                self._policy,
            ),
            python_type=cls,
        )
        return described[mapper]

    def list_types(self) -> tuple[TypeDescriptor, ...]:
        """Describe all mapped classes, ordered by class name."""
        described: dict[Mapper[Any], TypeDescriptor] = {}
        mappers = sorted(self._registry.mappers, key=lambda m: m.class_.__name__)
        descriptors = tuple(self._describe(mapper, described) for mapper in mappers)
        logger.debug("catalog_loaded", catalog="sqlalchemy", types=len(descriptors))
        return descriptors


__all__ = ["SQLAlchemyTypeCatalog"]
