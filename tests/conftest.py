from __future__ import annotations

import logging
import sys
from pathlib import Path
from textwrap import dedent
from types import ModuleType
from typing import Any, Callable, Iterator

import pytest

from dbcontract.codec import Engine, ExportFormat, MaskingLevel, State, VCSType
from dbcontract.store.modules.database import DatabaseStore
from dbcontract.store.modules.instance import InstanceStore

ALL_VOCABULARIES = [State, Engine, VCSType, MaskingLevel, ExportFormat]


@pytest.fixture(params=ALL_VOCABULARIES, ids=lambda cls: cls.__name__)
def vocabulary_cls(request: pytest.FixtureRequest) -> type:
    return request.param


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def slice_factory() -> Iterator[Callable[..., ModuleType]]:
    """Build throwaway slice modules and register them in ``sys.modules``."""

    created: list[str] = []

    def _factory(module_name: str, *, public: list[str] | None = None, **attrs: Any) -> ModuleType:
        module = ModuleType(module_name)
        for key, value in attrs.items():
            setattr(module, key, value)
        if public is not None:
            module.__all__ = public
        sys.modules[module_name] = module
        created.append(module_name)
        return module

    yield _factory
    for module_name in created:
        sys.modules.pop(module_name, None)


@pytest.fixture
def instance_store() -> InstanceStore:
    store = InstanceStore()
    store.upsert_many(
        [
            {"name": "instances/prod-mysql", "title": "Prod MySQL", "engine": "MYSQL", "state": "ACTIVE"},
            {"name": "instances/prod-pg", "title": "Prod PG", "engine": 3, "state": "ACTIVE"},
            {"name": "instances/old-oracle", "title": "Old Oracle", "engine": "ORACLE", "state": "DELETED"},
        ]
    )
    return store


@pytest.fixture
def database_store(instance_store: InstanceStore) -> DatabaseStore:
    store = DatabaseStore(instances=instance_store)
    store.upsert_many(
        [
            {
                "name": "instances/prod-mysql/databases/shop",
                "instance": "instances/prod-mysql",
                "project": "projects/shop",
                "characterSet": "utf8mb4",
                "syncState": "ACTIVE",
            },
            {
                "name": "instances/prod-pg/databases/billing",
                "instance": "instances/prod-pg",
                "project": "projects/billing",
                "syncState": "ACTIVE",
            },
            {
                "name": "instances/old-oracle/databases/legacy",
                "instance": "instances/old-oracle",
                "project": "projects/shop",
                "syncState": "DELETED",
            },
            {
                "name": "instances/gone/databases/orphan",
                "instance": "instances/gone",
                "project": "projects/shop",
            },
        ]
    )
    return store


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    logger = logging.getLogger("dbcontract")
    yield
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
