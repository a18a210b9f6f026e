"""
jobspine core - enums, errors, logging, settings and protocols.

Modules
-------
enums       JobCategory, JobInstanceState, AmbiguityPolicy
errors      JobSpineError hierarchy
logging     structlog configuration
protocols   TypeCatalog protocol, JobTrigger / JobInstance markers
settings    JobStorageSettings (pydantic-settings)
orm         SQLAlchemy declarative base and metamodel catalog (optional)
"""
