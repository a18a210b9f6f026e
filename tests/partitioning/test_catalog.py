"""Tests for jobspine.partitioning.catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pytest

from jobspine.core.enums import AmbiguityPolicy, JobCategory
from jobspine.core.errors import ClassificationError
from jobspine.core.protocols import JobInstance, JobTrigger, TypeCatalog
from jobspine.partitioning.catalog import ClassTypeCatalog, StaticTypeCatalog, is_abstract_type
from jobspine.partitioning.types import TypeDescriptor


class FrameworkEntity:
    pass


class Job(FrameworkEntity, ABC):
    @abstractmethod
    def run(self): ...


class EmailTrigger(Job, JobTrigger):
    def run(self):
        return "sent"


class DigestTrigger(EmailTrigger):
    pass


class ExportInstance(FrameworkEntity, JobInstance):
    __partition_abstract__ = True


class CsvExport(ExportInstance):
    pass


class Hybrid(JobTrigger, JobInstance):
    pass


class TestIsAbstractType:
    def test_abc_with_abstract_methods(self):
        assert is_abstract_type(Job)

    def test_explicit_flag(self):
        assert is_abstract_type(ExportInstance)

    def test_flag_is_not_inherited(self):
        assert not is_abstract_type(CsvExport)

    def test_plain_class(self):
        assert not is_abstract_type(EmailTrigger)


class TestStaticTypeCatalog:
    def test_returns_descriptors_in_order(self):
        a = TypeDescriptor("A")
        b = TypeDescriptor("B")
        catalog = StaticTypeCatalog([a, b])
        assert catalog.list_types() == (a, b)

    def test_satisfies_protocol(self):
        assert isinstance(StaticTypeCatalog([]), TypeCatalog)


class TestClassTypeCatalog:
    def _describe(self, *classes, **kwargs):
        return {d.name: d for d in ClassTypeCatalog(classes, **kwargs).list_types()}

    def test_categories_and_abstractness(self):
        types = self._describe(Job, EmailTrigger, DigestTrigger, ExportInstance, CsvExport)

        assert types["Job"].is_abstract
        assert types["Job"].category is JobCategory.NONE
        assert types["EmailTrigger"].category is JobCategory.TRIGGER
        assert types["DigestTrigger"].category is JobCategory.TRIGGER
        assert types["ExportInstance"].is_abstract
        assert types["CsvExport"].category is JobCategory.INSTANCE
        assert not types["CsvExport"].is_abstract

    def test_supertypes_follow_nearest_listed_base(self):
        types = self._describe(Job, EmailTrigger, DigestTrigger)

        assert types["DigestTrigger"].supertype is types["EmailTrigger"]
        assert types["EmailTrigger"].supertype is types["Job"]
        assert types["Job"].supertype is None

    def test_bases_outside_the_set_are_skipped(self):
        types = self._describe(DigestTrigger, Job)
        assert types["DigestTrigger"].supertype is types["Job"]

    def test_python_type_is_recorded(self):
        types = self._describe(EmailTrigger)
        assert types["EmailTrigger"].python_type is EmailTrigger

    def test_ambiguous_class_rejected(self):
        with pytest.raises(ClassificationError):
            ClassTypeCatalog([Hybrid]).list_types()

    def test_ambiguous_class_with_policy(self):
        types = self._describe(Hybrid, policy=AmbiguityPolicy.PREFER_INSTANCE)
        assert types["Hybrid"].category is JobCategory.INSTANCE

    def test_custom_markers_and_names(self):
        types = self._describe(
            Job,
            EmailTrigger,
            trigger_marker=Job,
            instance_marker=ExportInstance,
            name_of=lambda cls: cls.__name__.lower(),
        )
        assert types["job"].category is JobCategory.TRIGGER
        assert types["emailtrigger"].category is JobCategory.TRIGGER

    def test_duplicate_classes_listed_once(self):
        assert len(ClassTypeCatalog([EmailTrigger, EmailTrigger]).list_types()) == 1
