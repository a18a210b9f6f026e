"""SQLAlchemy 2.0 metamodel integration for jobspine.

Modules
-------
base        JobSpineBase (declarative base) + JobTrigger / JobInstance markers
catalog     SQLAlchemyTypeCatalog, a TypeCatalog over a declarative registry

Tags:
    jobspine, orm, sqlalchemy, declarative, import-guarded

Doc-Types:
    package-overview, module-index
"""

from __future__ import annotations

try:
    from jobspine.core.orm.base import JobInstance, JobSpineBase, JobTrigger
    from jobspine.core.orm.catalog import SQLAlchemyTypeCatalog
except ImportError as exc:
    raise ImportError(
        "sqlalchemy is required for the ORM layer.  "
        "Install it with:  pip install jobspine[sqlalchemy]"
    ) from exc

__all__ = [
    "JobSpineBase",
    "JobTrigger",
    "JobInstance",
    "SQLAlchemyTypeCatalog",
]
