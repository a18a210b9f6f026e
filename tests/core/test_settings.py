"""Tests for jobspine.core.settings.

Covers:
- JobStorageSettings defaults
- Environment variable override (JOB_STORAGE_ prefix)
- Conversion to AttributeBindings
- Validation
"""

import pytest
from pydantic import ValidationError

from jobspine.core.enums import AmbiguityPolicy, JobInstanceState
from jobspine.core.errors import InvalidConfigError
from jobspine.core.settings import JobStorageSettings
from jobspine.partitioning.bindings import AttributeBindings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    def test_trigger_defaults(self):
        s = JobStorageSettings()
        assert s.trigger_id_attribute == "id"
        assert s.trigger_schedule_attribute == "scheduleTime"
        assert s.trigger_last_execution_attribute == "lastExecutionTime"
        assert s.trigger_state_attribute == "state"
        assert s.trigger_partition_attribute is None

    def test_policy_and_template_defaults(self):
        s = JobStorageSettings()
        assert s.ambiguity_policy is AmbiguityPolicy.REJECT
        assert s.predicate_template == "TYPE({alias}) = {name}"
        assert s.log_level == "INFO"

    def test_default_bindings_match_builtin_defaults(self):
        assert JobStorageSettings().to_bindings() == AttributeBindings()


class TestEnvOverride:
    def test_attribute_from_env(self, monkeypatch):
        monkeypatch.setenv("JOB_STORAGE_INSTANCE_PARTITION_ATTRIBUTE", "partitionKey")
        bindings = JobStorageSettings().to_bindings()
        assert bindings.instance.partition_attribute == "partitionKey"
        assert bindings.trigger.partition_attribute == "id"

    def test_policy_from_env(self, monkeypatch):
        monkeypatch.setenv("JOB_STORAGE_AMBIGUITY_POLICY", "prefer_trigger")
        assert JobStorageSettings().ambiguity_policy is AmbiguityPolicy.PREFER_TRIGGER

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("JOB_STORAGE_TRIGGER_STATE_ATTRIBUTE=status\n")
        assert JobStorageSettings().trigger_state_attribute == "status"

    def test_unrelated_env_is_ignored(self, monkeypatch):
        monkeypatch.setenv("JOB_STORAGE_SOMETHING_ELSE", "1")
        JobStorageSettings()


class TestValidation:
    def test_template_must_reference_alias(self):
        with pytest.raises(ValidationError):
            JobStorageSettings(predicate_template="TYPE(x) = {name}")

    def test_template_with_unknown_placeholder(self):
        with pytest.raises(ValidationError, match="predicate template"):
            JobStorageSettings(predicate_template="TYPE({alias}) = {type}")

    def test_unknown_policy(self):
        with pytest.raises(ValidationError):
            JobStorageSettings(ambiguity_policy="first_wins")

    def test_unknown_state_mapping_fails_on_conversion(self):
        settings = JobStorageSettings(trigger_state_value_mapping="shout")
        with pytest.raises(InvalidConfigError):
            settings.to_bindings()

    def test_state_mapping_by_name(self):
        bindings = JobStorageSettings(instance_state_value_mapping="value").to_bindings()
        assert bindings.instance.state_value_mapper(JobInstanceState.NEW) == "NEW"
