"""Unit tests for arena/logging.py."""
import copy
import json

import pytest

import arena.logging as arena_logging
from arena.logging import (
    FileSink,
    LogLevel,
    NullSink,
    close_all_sinks,
    configure_logging,
    create_sink_for_environment,
    emit_record,
    get_logger,
    get_sink,
    register_sink,
)


@pytest.fixture(autouse=True)
def restore_logging_config():
    """Snapshot global logging config and sinks, restore after each test."""
    saved = copy.deepcopy(arena_logging._config)
    yield
    close_all_sinks()
    arena_logging._config.clear()
    arena_logging._config.update(saved)


class TestLoggerLevels:
    """ArenaLogger level filtering and formatting."""

    def test_get_logger_is_cached(self):
        assert get_logger('simulation') is get_logger('simulation')

    def test_info_printed_by_default(self, capsys):
        configure_logging(level='INFO')
        get_logger('test_mod').info("hello %d", 3)
        assert "[test_mod] INFO: hello 3" in capsys.readouterr().out

    def test_debug_filtered_at_info(self, capsys):
        configure_logging(level='INFO')
        get_logger('test_mod').debug("hidden")
        assert capsys.readouterr().out == ""

    def test_module_level_override(self, capsys):
        configure_logging(level='WARNING', modules={'spawner_test': 'TRACE'})
        get_logger('spawner_test').trace("visible")
        get_logger('other_test').info("hidden")
        out = capsys.readouterr().out
        assert "[spawner_test] TRACE: visible" in out
        assert "other_test" not in out

    def test_bad_format_args_do_not_raise(self, capsys):
        configure_logging(level='INFO')
        get_logger('test_mod').info("no placeholders", 1, 2)
        assert "no placeholders" in capsys.readouterr().out

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level='LOUD')
        assert arena_logging._config['default_level'] == LogLevel.INFO

    def test_env_config(self, monkeypatch):
        monkeypatch.setenv('ARENA_LOG_LEVEL', 'ERROR')
        monkeypatch.setenv('ARENA_LOG_SIMULATION', 'DEBUG')
        monkeypatch.setenv('ARENA_LOGGING_HAZARDS_ENABLED', 'true')
        arena_logging._load_env_config()
        assert arena_logging._config['default_level'] == LogLevel.ERROR
        assert arena_logging._config['module_levels']['simulation'] == LogLevel.DEBUG
        assert arena_logging.get_module_config('hazards') == {'enabled': True}


class TestSinks:
    """Structured record sinks."""

    def test_emit_without_sink(self):
        assert emit_record('nowhere', {'type': 'x'}) is False

    def test_null_sink_accepts_records(self):
        register_sink('hazards', NullSink())
        assert emit_record('hazards', {'type': 'spawn'}) is True

    def test_file_sink_writes_jsonl(self, tmp_path):
        sink = FileSink(log_dir=str(tmp_path), session_name='run')
        register_sink('hazards', sink)
        emit_record('hazards', {'type': 'expire', 'hit': True})
        path = sink.log_paths['hazards']
        close_all_sinks()

        lines = [json.loads(line) for line in path.read_text().splitlines()]
        assert lines[0]['type'] == 'header'
        assert lines[1]['type'] == 'expire'
        assert lines[1]['hit'] is True
        assert 'wall_time' in lines[1]
        assert lines[-1]['type'] == 'footer'

    def test_create_sink_disabled_by_default(self):
        assert isinstance(create_sink_for_environment('unconfigured'), NullSink)

    def test_create_sink_when_enabled(self, tmp_path, monkeypatch):
        monkeypatch.setenv('ARENA_LOGGING_HAZARDS_ENABLED', 'true')
        arena_logging._load_env_config()
        configure_logging(log_dir=str(tmp_path))
        sink = create_sink_for_environment('hazards')
        assert isinstance(sink, FileSink)
        sink.close()

    def test_close_all_sinks_unregisters(self):
        register_sink('hazards', NullSink())
        close_all_sinks()
        assert get_sink('hazards') is None


class TestPackageImport:
    """The arena package exposes its own logging module."""

    def test_attribute_import_is_arena_logging(self):
        from arena import logging as via_package
        assert via_package is arena_logging
        assert via_package.__name__ == 'arena.logging'
        assert hasattr(via_package, '_config')
