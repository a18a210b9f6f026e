"""Declarative base and job marker mixins for ORM-mapped record types.

Record types for job triggers and job instances are ordinary SQLAlchemy 2.0
declarative classes that additionally inherit one of the capability markers.
Abstract record types (never instantiated, never queried by themselves) are
mapped classes that either declare abstract methods or set
``__partition_abstract__ = True``.

Example
-------
::

    class Job(JobSpineBase):
        __tablename__ = "jobs"
        __partition_abstract__ = True
        id: Mapped[int] = mapped_column(primary_key=True)
        type: Mapped[str]
        __mapper_args__ = {"polymorphic_on": "type"}

    class EmailTrigger(Job, JobTrigger):
        __mapper_args__ = {"polymorphic_identity": "email"}
"""

from __future__ import annotations

import datetime

from sqlalchemy import JSON, DateTime, Integer, Text
from sqlalchemy.orm import DeclarativeBase

from jobspine.core.protocols import JobInstance, JobTrigger


class JobSpineBase(DeclarativeBase):
    """Shared declarative base for job record types.

    ``type_annotation_map`` lets Mapped columns use plain Python types:

    * ``str``   → ``Text``
    * ``int``   → ``Integer``
    * ``bool``  → ``Integer``  (SQLite has no native BOOLEAN)
    * ``datetime.datetime`` → ``DateTime``
    * ``dict``  → ``JSON``
    """

    type_annotation_map = {
        str: Text,
        int: Integer,
        bool: Integer,
        datetime.datetime: DateTime,
        dict: JSON,
    }


__all__ = ["JobSpineBase", "JobTrigger", "JobInstance"]
