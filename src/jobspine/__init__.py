"""jobspine - derive job engine partition keys from a record type hierarchy.

Quick start::

    from jobspine import PartitionKeyProvider
    from jobspine.core.orm import SQLAlchemyTypeCatalog

    provider = PartitionKeyProvider.from_settings(SQLAlchemyTypeCatalog.from_settings(Base))
    for key in provider.trigger_partition_keys:
        print(key.name, key.partition_predicate("t"))
"""

from jobspine.core.enums import AmbiguityPolicy, JobCategory, JobInstanceState
from jobspine.core.errors import (
    ClassificationError,
    ConfigError,
    InvalidCatalogError,
    JobSpineError,
    MissingCatalogError,
    MissingConfigError,
)
from jobspine.partitioning import (
    AttributeBindings,
    CategoryBindings,
    PartitionKey,
    PartitionKeyProvider,
    TypeDescriptor,
    build,
    flatten,
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguityPolicy",
    "JobCategory",
    "JobInstanceState",
    "JobSpineError",
    "ConfigError",
    "MissingConfigError",
    "MissingCatalogError",
    "InvalidCatalogError",
    "ClassificationError",
    "AttributeBindings",
    "CategoryBindings",
    "PartitionKey",
    "PartitionKeyProvider",
    "TypeDescriptor",
    "build",
    "flatten",
]
