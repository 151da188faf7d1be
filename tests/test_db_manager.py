"""Tests for DatabaseManager against a file-backed database."""

from db.manager import DatabaseManager
from models.account import Account
from services.base import Services


class TestDatabaseManager:
    def test_connect_creates_data_dir(self, test_config):
        manager = DatabaseManager(test_config)

        with manager.connect() as conn:
            conn.execute("SELECT 1")

        assert test_config.db_path.exists()

    def test_init_schema_is_idempotent(self, test_config):
        manager = DatabaseManager(test_config)

        manager.init_schema()
        manager.init_schema()

        with manager.connect() as conn:
            tables = {
                row[0]
                for row in conn.execute(
                    "SELECT name FROM sqlite_master WHERE type = 'table'"
                )
            }
        assert "accounts" in tables

    def test_accounts_persist_across_connections(self, test_config):
        manager = DatabaseManager(test_config)
        manager.init_schema()
        services = Services(test_config, db_manager=manager)

        created = services.accounts.create(Account.create(1, nickname="Main"))

        reloaded = Services(test_config).accounts.find(created.account_id)
        assert reloaded == created
        assert reloaded.nickname == "Main"

    def test_get_db_path(self, test_config):
        assert DatabaseManager(test_config).get_db_path() == test_config.db_path
