"""Environment-driven settings for partition key derivation.

Every attribute name the job engine queries by can be overridden per category
through ``JOB_STORAGE_*`` environment variables or a ``.env`` file. Unset
values fall back to the conventional names (``id``, ``scheduleTime``,
``lastExecutionTime``, ``state``).

Fields
──────
trigger_* / instance_*      : attribute names per job category
*_partition_attribute       : defaults to the id attribute of the category
*_state_value_mapping       : identity | name | value | ordinal | module:attr
predicate_template          : str.format template with {alias} and {name}
ambiguity_policy            : reject | prefer_trigger | prefer_instance
log_level                   : structlog log level

Examples:
    >>> settings = JobStorageSettings(instance_state_value_mapping="ordinal")
    >>> settings.to_bindings().instance.state_value_mapper.__name__
    'state_ordinal'

Tags:
    settings, configuration, pydantic, environment, jobspine

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jobspine.core.enums import AmbiguityPolicy
from jobspine.core.errors import InvalidConfigError
from jobspine.partitioning.bindings import AttributeBindings, CategoryBindings
from jobspine.partitioning.types import DEFAULT_PREDICATE_TEMPLATE, check_predicate_template


class JobStorageSettings(BaseSettings):
    """Attribute bindings and derivation policy, read from ``JOB_STORAGE_*``."""

    model_config = SettingsConfigDict(
        env_prefix="JOB_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Triggers ─────────────────────────────────────────────────
    trigger_id_attribute: str = "id"
    trigger_schedule_attribute: str = "scheduleTime"
    trigger_last_execution_attribute: str = "lastExecutionTime"
    trigger_partition_attribute: str | None = None
    trigger_state_attribute: str = "state"
    trigger_state_value_mapping: str = "identity"

    # ── Instances ────────────────────────────────────────────────
    instance_id_attribute: str = "id"
    instance_schedule_attribute: str = "scheduleTime"
    instance_last_execution_attribute: str = "lastExecutionTime"
    instance_partition_attribute: str | None = None
    instance_state_attribute: str = "state"
    instance_state_value_mapping: str = "identity"

    # ── Derivation ───────────────────────────────────────────────
    predicate_template: str = Field(
        default=DEFAULT_PREDICATE_TEMPLATE,
        description="Type discriminator fragment; {alias} and {name} are substituted",
    )
    ambiguity_policy: AmbiguityPolicy = AmbiguityPolicy.REJECT

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"

    @field_validator("predicate_template")
    @classmethod
    def _template_renders(cls, value: str) -> str:
        try:
            return check_predicate_template(value)
        except InvalidConfigError as exc:
            raise ValueError(exc.message) from exc

    def to_bindings(self) -> AttributeBindings:
        """Build the attribute bindings the partition key builder consumes."""
        return AttributeBindings(
            trigger=CategoryBindings(
                id_attribute=self.trigger_id_attribute,
                schedule_attribute=self.trigger_schedule_attribute,
                last_execution_attribute=self.trigger_last_execution_attribute,
                partition_attribute=self.trigger_partition_attribute,
                state_attribute=self.trigger_state_attribute,
                state_value_mapper=self.trigger_state_value_mapping,
            ),
            instance=CategoryBindings(
                id_attribute=self.instance_id_attribute,
                schedule_attribute=self.instance_schedule_attribute,
                last_execution_attribute=self.instance_last_execution_attribute,
                partition_attribute=self.instance_partition_attribute,
                state_attribute=self.instance_state_attribute,
                state_value_mapper=self.instance_state_value_mapping,
            ),
        )


__all__ = ["JobStorageSettings"]
