"""Turn trigger/instance marker capabilities into an explicit JobCategory."""

from __future__ import annotations

from jobspine.core.enums import AmbiguityPolicy, JobCategory
from jobspine.core.errors import ClassificationError


def classify(
    name: str,
    is_trigger: bool,
    is_instance: bool,
    policy: AmbiguityPolicy = AmbiguityPolicy.REJECT,
) -> JobCategory:
    """Classify a record type by the markers it carries.

    Args:
        name: Type name, used for error context only
        is_trigger: Whether the type has the trigger capability
        is_instance: Whether the type has the instance capability
        policy: How to resolve a type carrying both markers

    Raises:
        ClassificationError: Both markers present and policy is ``REJECT``
    """
    if is_trigger and is_instance:
        if policy is AmbiguityPolicy.PREFER_TRIGGER:
            return JobCategory.TRIGGER
        if policy is AmbiguityPolicy.PREFER_INSTANCE:
            return JobCategory.INSTANCE
        raise ClassificationError(
            f"Type {name} is both a job trigger and a job instance"
        ).with_context(type_name=name)
    if is_trigger:
        return JobCategory.TRIGGER
    if is_instance:
        return JobCategory.INSTANCE
    return JobCategory.NONE


__all__ = ["classify"]
