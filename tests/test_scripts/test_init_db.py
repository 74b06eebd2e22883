"""Tests for the database bootstrap script."""

import pytest

from message_board.services.message_store import SEED_TEXTS
from scripts.init_db import bootstrap, main


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'data' / 'board.db'}"


class TestBootstrap:
    @pytest.mark.asyncio
    async def test_creates_schema_without_seeding(self, database_url):
        messages = await bootstrap(database_url)
        assert messages == []

    @pytest.mark.asyncio
    async def test_seed_empty_table(self, database_url):
        messages = await bootstrap(database_url, seed=True)
        assert [m.text for m in messages] == sorted(SEED_TEXTS)

    @pytest.mark.asyncio
    async def test_seed_skips_non_empty_table(self, database_url):
        await bootstrap(database_url, seed=True)
        messages = await bootstrap(database_url, seed=True)
        assert len(messages) == 3

    @pytest.mark.asyncio
    async def test_force_seed_duplicates(self, database_url):
        await bootstrap(database_url, seed=True)
        messages = await bootstrap(database_url, force_seed=True)
        assert len(messages) == 6


@pytest.mark.usefixtures("restore_root_logger", "clear_settings_cache")
class TestMain:
    def test_main_seeds_and_prints(self, database_url, capsys):
        assert main(["--database-url", database_url, "--seed"]) == 0

        out = capsys.readouterr().out
        assert "3 message(s)" in out
        for text in SEED_TEXTS:
            assert text in out

    def test_main_without_seed(self, database_url, capsys):
        assert main(["--database-url", database_url]) == 0
        assert "0 message(s)" in capsys.readouterr().out

    def test_seed_on_init_setting(self, database_url, capsys, monkeypatch):
        monkeypatch.setenv("SEED_ON_INIT", "true")
        assert main(["--database-url", database_url]) == 0
        assert "3 message(s)" in capsys.readouterr().out
