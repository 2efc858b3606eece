from __future__ import annotations

import threading
from datetime import datetime, timezone

import pytest

from dbcontract.codec import Engine, ExportFormat, MaskingLevel, State, VCSType
from dbcontract.core.errors import EntityNotFoundError, SliceError
from dbcontract.store.modules.database import ALL_DATABASE_NAME, Database, DatabaseFind, DatabasePatch
from dbcontract.store.modules.environment import Environment, EnvironmentStore
from dbcontract.store.modules.instance import Instance
from dbcontract.store.modules.policy import PolicyStore, masking_rule_name
from dbcontract.store.modules.project import ProjectStore
from dbcontract.store.modules.sql import ExportStore, export_file_extension
from dbcontract.store.modules.vcs import VCSConnectorStore, VCSProviderStore


def test_entity_should_decode_wire_payload_and_encode_back() -> None:
    payload = {
        "name": "instances/prod-mysql",
        "title": "Prod",
        "engine": "MYSQL",
        "engineVersion": "8.0.33",
        "state": 1,
    }
    instance = Instance.from_json(payload)
    assert instance.engine is Engine.MYSQL
    assert instance.state is State.ACTIVE
    wire = instance.to_json()
    assert wire["engine"] == "MYSQL"
    assert wire["engineVersion"] == "8.0.33"
    assert wire["state"] == "ACTIVE"


def test_entity_should_keep_unknown_enum_values_as_sentinel() -> None:
    instance = Instance.from_json({"name": "instances/x", "engine": "DUCKDB", "state": 3})
    assert instance.engine is Engine.UNRECOGNIZED
    assert instance.state is State.UNRECOGNIZED
    assert instance.to_json()["engine"] == "UNRECOGNIZED"


def test_entity_should_ignore_unknown_wire_fields() -> None:
    env = Environment.from_json({"name": "environments/prod", "tier": "PROTECTED"})
    assert env.name == "environments/prod"
    assert env.state is State.STATE_UNSPECIFIED


def test_environment_store_should_order_and_hide_deleted() -> None:
    store = EnvironmentStore()
    store.upsert_many(
        [
            {"name": "environments/prod", "order": 2, "state": "ACTIVE"},
            {"name": "environments/test", "order": 1, "state": "ACTIVE"},
            {"name": "environments/staging", "order": 0, "state": "DELETED"},
        ]
    )
    assert [env.name for env in store.list_ordered()] == ["environments/test", "environments/prod"]
    assert len(store.list_ordered(show_deleted=True)) == 3


def test_entity_store_should_reject_unknown_update_fields() -> None:
    store = EnvironmentStore()
    store.upsert({"name": "environments/prod"})
    with pytest.raises(SliceError):
        store.update("environments/prod", tier="x")
    with pytest.raises(SliceError):
        store.update("environments/prod", name="environments/other")
    updated = store.update("environments/prod", title="Production", state="DELETED")
    assert updated.title == "Production"
    assert updated.state is State.DELETED


def test_entity_store_update_should_refuse_rename_by_keyword() -> None:
    store = EnvironmentStore()
    store.upsert({"name": "environments/prod", "title": "Prod"})
    with pytest.raises(SliceError, match="cannot be changed"):
        store.update("environments/prod", name="environments/staging")
    assert store.get("environments/staging") is None
    same = store.update("environments/prod", name="environments/prod", order=2)
    assert same.order == 2


def test_entity_store_list_all_should_tolerate_concurrent_writers() -> None:
    store = EnvironmentStore()

    def _writer() -> None:
        for index in range(2000):
            store.upsert({"name": f"environments/env-{index:04d}"})

    writer = threading.Thread(target=_writer)
    writer.start()
    while writer.is_alive():
        store.list_all()
    writer.join()
    assert len(store.list_all()) == 2000


def test_entity_store_should_raise_for_missing_entities() -> None:
    store = EnvironmentStore()
    assert store.get("environments/none") is None
    with pytest.raises(EntityNotFoundError):
        store.require("environments/none")
    with pytest.raises(EntityNotFoundError):
        store.remove("environments/none")
    with pytest.raises(EntityNotFoundError):
        store.update("environments/none", title="x")


def test_entity_store_should_reject_foreign_objects() -> None:
    with pytest.raises(SliceError):
        EnvironmentStore().upsert(42)  # type: ignore[arg-type]


def test_instance_store_should_filter_by_engine(instance_store) -> None:
    assert [item.name for item in instance_store.list_by_engine("MYSQL")] == ["instances/prod-mysql"]
    assert [item.name for item in instance_store.list_by_engine(3)] == ["instances/prod-pg"]
    assert instance_store.list_by_engine("ORACLE") == []
    assert len(instance_store.list_by_engine(Engine.ORACLE, show_deleted=True)) == 1


def test_database_find_should_hide_databases_of_missing_or_deleted_instances(database_store) -> None:
    names = [db.name for db in database_store.find(DatabaseFind())]
    assert names == [
        "instances/prod-mysql/databases/shop",
        "instances/prod-pg/databases/billing",
    ]


def test_database_find_with_instance_should_keep_deleted_instance_databases(database_store) -> None:
    found = database_store.find(DatabaseFind(instance="instances/old-oracle"))
    assert [db.name for db in found] == ["instances/old-oracle/databases/legacy"]


def test_database_find_should_filter_by_project_and_name(database_store) -> None:
    by_project = database_store.find(DatabaseFind(project="projects/shop"))
    assert [db.name for db in by_project] == ["instances/prod-mysql/databases/shop"]
    by_name = database_store.find(DatabaseFind(database_name="billing"))
    assert [db.instance for db in by_name] == ["instances/prod-pg"]


def test_database_find_should_filter_by_sync_state(database_store) -> None:
    active = database_store.find(DatabaseFind(sync_state="ACTIVE"))
    assert [db.name for db in active] == [
        "instances/prod-mysql/databases/shop",
        "instances/prod-pg/databases/billing",
    ]
    deleted = database_store.find(DatabaseFind(instance="instances/old-oracle", sync_state=State.DELETED))
    assert [db.name for db in deleted] == ["instances/old-oracle/databases/legacy"]
    assert database_store.find(DatabaseFind(sync_state=2)) == []


def test_database_find_should_skip_all_database_unless_asked(database_store) -> None:
    database_store.upsert({"name": f"instances/prod-pg/databases/{ALL_DATABASE_NAME}", "instance": "instances/prod-pg"})
    default = database_store.find(DatabaseFind(instance="instances/prod-pg"))
    assert [db.name for db in default] == ["instances/prod-pg/databases/billing"]
    everything = database_store.find(DatabaseFind(instance="instances/prod-pg", include_all_database=True))
    assert [db.name for db in everything] == [
        "instances/prod-pg/databases/*",
        "instances/prod-pg/databases/billing",
    ]


def test_database_should_compose_instance(database_store) -> None:
    database = database_store.require("instances/prod-mysql/databases/shop")
    instance = database_store.instance_of(database)
    assert instance is not None
    assert instance.engine is Engine.MYSQL


def test_database_patch_should_apply_only_set_fields(database_store) -> None:
    synced_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    patched = database_store.patch(
        DatabasePatch(
            name="instances/prod-mysql/databases/shop",
            schema_version="20240101",
            sync_state="DELETED",
            successful_sync_time=synced_at,
        )
    )
    assert patched.schema_version == "20240101"
    assert patched.sync_state is State.DELETED
    assert patched.character_set == "utf8mb4"
    assert patched.to_json()["successfulSyncTime"].startswith("2024-01-01T00:00:00")


def test_database_patch_should_fail_for_missing_database(database_store) -> None:
    with pytest.raises(EntityNotFoundError):
        database_store.patch(DatabasePatch(name="instances/prod-pg/databases/nope", schema_version="1"))
    with pytest.raises(EntityNotFoundError):
        database_store.patch(DatabasePatch(name="instances/prod-pg/databases/nope"))


def test_database_wire_shape_should_use_camel_case() -> None:
    database = Database.from_json({"name": "instances/a/databases/b", "syncState": "ACTIVE", "schemaVersion": "v1"})
    assert database.to_json()["syncState"] == "ACTIVE"
    assert database.schema_version == "v1"


def test_project_store_should_find_by_key() -> None:
    store = ProjectStore()
    store.upsert({"name": "projects/shop", "key": "SHOP", "state": "ACTIVE"})
    store.upsert({"name": "projects/old", "key": "OLD", "state": "DELETED"})
    assert store.find_by_key("SHOP").name == "projects/shop"
    assert store.find_by_key("OLD") is None


def test_vcs_stores_should_filter_by_type_and_project() -> None:
    providers = VCSProviderStore()
    providers.upsert_many(
        [
            {"name": "vcsProviders/gh", "type": "GITHUB", "url": "https://github.com"},
            {"name": "vcsProviders/ado", "type": 4},
            {"name": "vcsProviders/future", "type": "GITEA"},
        ]
    )
    assert [p.name for p in providers.list_by_type(VCSType.GITHUB)] == ["vcsProviders/gh"]
    assert [p.name for p in providers.list_by_type("AZURE_DEVOPS")] == ["vcsProviders/ado"]
    assert [p.name for p in providers.list_by_type("UNRECOGNIZED")] == ["vcsProviders/future"]

    connectors = VCSConnectorStore()
    connectors.upsert({"name": "projects/shop/vcsConnectors/main", "vcsProvider": "vcsProviders/gh"})
    assert len(connectors.list_for_provider("vcsProviders/gh")) == 1
    assert len(connectors.list_for_project("projects/shop")) == 1
    assert connectors.list_for_project("projects/sho") == []


def test_policy_should_fall_back_to_default_for_unknown_levels() -> None:
    store = PolicyStore()
    db = "instances/a/databases/b"
    store.upsert_many(
        [
            {"name": masking_rule_name(db, "users", "email"), "database": db, "table": "users", "column": "email", "maskingLevel": "PARTIAL"},
            {"name": masking_rule_name(db, "users", "ssn"), "database": db, "table": "users", "column": "ssn", "maskingLevel": "REDACTED_V2"},
            {"name": masking_rule_name(db, "users", "id"), "database": db, "table": "users", "column": "id"},
        ]
    )
    assert store.effective_masking_level(db, "users", "email") is MaskingLevel.PARTIAL
    assert store.effective_masking_level(db, "users", "ssn") is MaskingLevel.FULL
    assert store.effective_masking_level(db, "users", "id") is MaskingLevel.FULL
    assert store.effective_masking_level(db, "users", "name", default=MaskingLevel.NONE) is MaskingLevel.NONE
    assert len(store.rules_for_database(db)) == 3


def test_export_store_should_skip_unknown_formats() -> None:
    store = ExportStore()
    store.upsert_many(
        [
            {"name": "exports/1", "statement": "SELECT 1", "format": "CSV"},
            {"name": "exports/2", "statement": "SELECT 2", "format": "PARQUET"},
            {"name": "exports/3", "statement": "SELECT 3"},
        ]
    )
    assert [item.name for item in store.exportable()] == ["exports/1"]
    assert [item.name for item in store.list_by_format(ExportFormat.CSV)] == ["exports/1"]
    assert export_file_extension("XLSX") == "xlsx"
    assert export_file_extension(ExportFormat.JSON) == "json"
    assert export_file_extension(ExportFormat.UNRECOGNIZED) is None
    assert export_file_extension(0) is None
