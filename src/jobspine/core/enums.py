"""
Shared enums for jobspine.

STDLIB ONLY - NO PYDANTIC.
"""

from enum import Enum


class JobCategory(str, Enum):
    """
    Which kind of schedulable work a record type represents.

    Attached to each type descriptor by the catalog provider, so the
    hierarchy walk never has to re-check marker classes.
    """

    TRIGGER = "trigger"
    INSTANCE = "instance"
    NONE = "none"


class JobInstanceState(str, Enum):
    """
    Abstract state of a job instance or trigger.

    State-value mappers translate these into whatever the storage column
    holds. Declaration order is the ordinal.
    """

    NEW = "NEW"
    DONE = "DONE"
    FAILED = "FAILED"
    DEFERRED = "DEFERRED"
    DROPPED = "DROPPED"
    RUNNING = "RUNNING"
    REMOVED = "REMOVED"

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)


class AmbiguityPolicy(str, Enum):
    """
    What to do with a record type that carries both the trigger and the
    instance marker.
    """

    REJECT = "reject"
    PREFER_TRIGGER = "prefer_trigger"
    PREFER_INSTANCE = "prefer_instance"
