import logging
from pathlib import Path

from faculty_sync.config import Settings
from faculty_sync.logging_setup import setup_logging


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.log_level == "INFO"
    assert s.mongo_database == "faculty_db"
    assert s.universities_collection == "universities"
    assert s.faculty_collection == "faculty"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("MONGO_DATABASE", "faculty_test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.mongo_database == "faculty_test"
    assert s.log_level == "debug"


def test_setup_logging_adds_console_and_file_once(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging("unit", log_dir=tmp_path)
        setup_logging("unit", log_dir=tmp_path)

        assert len(root.handlers) == 2
        assert (tmp_path / "unit.log").exists()
    finally:
        for h in root.handlers:
            h.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_log_dir_is_relative_to_working_directory():
    s = Settings(_env_file=None)
    assert s.log_dir == Path("logs")
    assert not s.log_dir.is_absolute()
