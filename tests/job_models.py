"""Sample job record hierarchy mapped on JobSpineBase.

    Job (abstract, single table "jobs")
    ├── EmailTrigger          trigger
    │   └── DigestTrigger     trigger
    └── ReportTrigger         trigger

    AbstractRun (abstract instance, single table "runs")
    ├── ShellRun              instance
    └── HttpRun               instance

    ExportInstance            instance, own table
    AuditLog                  neither
"""

from __future__ import annotations

import datetime

from sqlalchemy.orm import Mapped, mapped_column

from jobspine.core.orm import JobInstance, JobSpineBase, JobTrigger


class Job(JobSpineBase):
    __tablename__ = "jobs"
    __partition_abstract__ = True

    id: Mapped[int] = mapped_column(primary_key=True)
    kind: Mapped[str]
    schedule_time: Mapped[datetime.datetime | None]
    state: Mapped[str] = mapped_column(default="NEW")

    __mapper_args__ = {"polymorphic_on": "kind"}


class EmailTrigger(Job, JobTrigger):
    __mapper_args__ = {"polymorphic_identity": "email"}


class DigestTrigger(EmailTrigger):
    __mapper_args__ = {"polymorphic_identity": "digest"}


class ReportTrigger(Job, JobTrigger):
    __mapper_args__ = {"polymorphic_identity": "report"}


class AbstractRun(JobSpineBase, JobInstance):
    __tablename__ = "runs"
    __partition_abstract__ = True

    id: Mapped[int] = mapped_column(primary_key=True)
    kind: Mapped[str]
    partition: Mapped[int] = mapped_column(default=0)

    __mapper_args__ = {"polymorphic_on": "kind"}


class ShellRun(AbstractRun):
    __mapper_args__ = {"polymorphic_identity": "shell"}


class HttpRun(AbstractRun):
    __mapper_args__ = {"polymorphic_identity": "http"}


class ExportInstance(JobSpineBase, JobInstance):
    __tablename__ = "export_instances"

    id: Mapped[int] = mapped_column(primary_key=True)
    schedule_time: Mapped[datetime.datetime | None]


class AuditLog(JobSpineBase):
    __tablename__ = "audit_log"

    id: Mapped[int] = mapped_column(primary_key=True)
    message: Mapped[str]
