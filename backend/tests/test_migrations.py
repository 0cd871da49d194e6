from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from app.core.constants import HIKES_TABLE
from app.db import init_db

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


def _alembic_config(database_url: str) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg


def test_upgrade_creates_hikes_table(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    command.upgrade(_alembic_config(url), "head")

    engine = create_engine(url)
    try:
        migrated = {c["name"] for c in inspect(engine).get_columns(HIKES_TABLE)}
    finally:
        engine.dispose()

    reference = create_engine(f"sqlite:///{tmp_path / 'create_all.db'}")
    try:
        init_db(reference)
        expected = {c["name"] for c in inspect(reference).get_columns(HIKES_TABLE)}
    finally:
        reference.dispose()

    assert migrated == expected


def test_upgrade_is_a_no_op_on_existing_table(engine, database_url):
    command.upgrade(_alembic_config(database_url), "head")
    assert HIKES_TABLE in inspect(engine).get_table_names()


def test_downgrade_drops_table(tmp_path):
    url = f"sqlite:///{tmp_path / 'down.db'}"
    cfg = _alembic_config(url)
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    engine = create_engine(url)
    try:
        assert HIKES_TABLE not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
