"""In-memory type catalogs.

``StaticTypeCatalog`` serves descriptors that were built by hand.
``ClassTypeCatalog`` derives them from plain Python classes, using the
``JobTrigger`` / ``JobInstance`` markers for classification and the class
MRO for supertypes.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable

from jobspine.core.enums import AmbiguityPolicy
from jobspine.core.logging import get_logger
from jobspine.core.protocols import JobInstance, JobTrigger
from jobspine.partitioning.classification import classify
from jobspine.partitioning.types import TypeDescriptor

logger = get_logger(__name__)


def is_abstract_type(cls: type) -> bool:
    """A class is abstract if it has unimplemented abstract methods or
    declares ``__partition_abstract__ = True`` itself (not inherited)."""
    return inspect.isabstract(cls) or bool(cls.__dict__.get("__partition_abstract__", False))


class StaticTypeCatalog:
    """Catalog over a fixed sequence of descriptors."""

    def __init__(self, descriptors: Iterable[TypeDescriptor]):
        self._descriptors = tuple(descriptors)

    def list_types(self) -> tuple[TypeDescriptor, ...]:
        return self._descriptors


class ClassTypeCatalog:
    """Catalog over a set of Python classes.

    The supertype of a class is the nearest class in its MRO that is also
    part of the set; bases outside the set end the hierarchy.

    Args:
        classes: Record classes, in catalog order
        trigger_marker: Base class marking trigger types
        instance_marker: Base class marking instance types
        policy: Resolution for classes carrying both markers
    """

    def __init__(
        self,
        classes: Iterable[type],
        trigger_marker: type = JobTrigger,
        instance_marker: type = JobInstance,
        policy: AmbiguityPolicy = AmbiguityPolicy.REJECT,
        name_of: Callable[[type], str] | None = None,
    ):
        self._classes = tuple(dict.fromkeys(classes))
        self._trigger_marker = trigger_marker
        self._instance_marker = instance_marker
        self._policy = policy
        self._name_of = name_of or (lambda cls: cls.__name__)

    def _supertype_of(self, cls: type) -> type | None:
        members = set(self._classes)
        for base in cls.__mro__[1:]:
            if base in members:
                return base
        return None

    def list_types(self) -> tuple[TypeDescriptor, ...]:
        described: dict[type, TypeDescriptor] = {}

        def describe(cls: type) -> TypeDescriptor:
            if cls in described:
                return described[cls]
            supertype = self._supertype_of(cls)
            name = self._name_of(cls)
            described[cls] = TypeDescriptor(
                name=name,
                is_abstract=is_abstract_type(cls),
                supertype=describe(supertype) if supertype is not None else None,
                category=classify(
                    name,
                    issubclass(cls, self._trigger_marker),
                    issubclass(cls, self._instance_marker),
                    self._policy,
                ),
                python_type=cls,
            )
            return described[cls]

        descriptors = tuple(describe(cls) for cls in self._classes)
        logger.debug("catalog_loaded", catalog=type(self).__name__, types=len(descriptors))
        return descriptors


__all__ = ["is_abstract_type", "StaticTypeCatalog", "ClassTypeCatalog"]
