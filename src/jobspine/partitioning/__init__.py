"""Partition key derivation: flatten the type hierarchy, then build keys.

Modules
-------
types           TypeDescriptor, PartitionKey, TypePredicate
classification  marker capabilities → JobCategory
bindings        CategoryBindings, AttributeBindings, state value mappers
catalog         StaticTypeCatalog, ClassTypeCatalog
flattener       flatten()
builder         build()
provider        PartitionKeyProvider
"""

from jobspine.partitioning.bindings import AttributeBindings, CategoryBindings
from jobspine.partitioning.builder import build
from jobspine.partitioning.catalog import ClassTypeCatalog, StaticTypeCatalog
from jobspine.partitioning.classification import classify
from jobspine.partitioning.flattener import flatten
from jobspine.partitioning.provider import PartitionKeyProvider
from jobspine.partitioning.types import (
    CoverageMap,
    PartitionKey,
    TypeDescriptor,
    TypePredicate,
)

__all__ = [
    "AttributeBindings",
    "CategoryBindings",
    "ClassTypeCatalog",
    "CoverageMap",
    "PartitionKey",
    "PartitionKeyProvider",
    "StaticTypeCatalog",
    "TypeDescriptor",
    "TypePredicate",
    "build",
    "classify",
    "flatten",
]
