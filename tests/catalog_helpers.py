"""Terse TypeDescriptor construction for hierarchy tests."""

from __future__ import annotations

from jobspine.core.enums import JobCategory
from jobspine.partitioning.types import TypeDescriptor

T = JobCategory.TRIGGER
I = JobCategory.INSTANCE  # noqa: E741
N = JobCategory.NONE


def make_type(
    name: str,
    category: JobCategory = N,
    supertype: TypeDescriptor | None = None,
    abstract: bool = False,
) -> TypeDescriptor:
    return TypeDescriptor(name=name, is_abstract=abstract, supertype=supertype, category=category)


def names(descriptors) -> list[str]:
    return [d.name for d in descriptors]
