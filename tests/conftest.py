"""
Shared pytest fixtures for jobspine tests.

``catalog_helpers`` builds TypeDescriptor chains tersely; ``job_models``
holds the SQLAlchemy sample hierarchy used by the ORM and CLI tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from catalog_helpers import T, make_type
from jobspine.partitioning.types import TypeDescriptor


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if test_path.name in ("test_orm.py", "test_keys_cli.py"):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def three_level_catalog() -> list[TypeDescriptor]:
    """abstract root → non-abstract middle → two concrete leaves, all triggers."""
    root = make_type("Job", T, abstract=True)
    middle = make_type("Mail", T, root)
    plain = make_type("PlainMail", T, middle)
    html = make_type("HtmlMail", T, middle)
    return [root, middle, plain, html]
