"""
Arena Logging System

Leveled per-module console logging, plus JSONL record sinks so a run's
hazard events can be replayed or charted afterwards.

Usage:
    from arena.logging import get_logger, emit_record

    log = get_logger('simulation')
    log.info("Actor took %.1f damage", 100.0)
    log.trace("Per-tick detail")

    emit_record('hazards', {'type': 'expire', 'handle': 3, 'hit': True})

Environment:
    ARENA_LOG_LEVEL=DEBUG                 # default level for every module
    ARENA_LOG_SIMULATION=TRACE            # level for one module
    ARENA_LOG_DIR=/tmp/arena-logs         # where record files go
    ARENA_LOGGING_HAZARDS_ENABLED=true    # write 'hazards' records to disk
"""

import json
import os
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Log levels, numbered like the stdlib ones."""
    TRACE = 5      # per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
    'modules': {},           # record settings per module, e.g. {'hazards': {'enabled': True}}
}


def _level_from_string(name: str) -> LogLevel:
    """Level by name, INFO when unrecognized. WARN is accepted for WARNING."""
    name = name.strip().upper()
    if name == 'WARN':
        name = 'WARNING'
    return LogLevel.__members__.get(name, LogLevel.INFO)


def _parse_env_value(value: str) -> Any:
    lower = value.strip().lower()
    if lower in ('true', '1', 'yes', 'on'):
        return True
    if lower in ('false', '0', 'no', 'off'):
        return False
    return value


def get_log_dir() -> str:
    """Directory for record files.

    Uses the configured directory, then ARENA_LOG_DIR, then
    ``$XDG_DATA_HOME/arena/logs`` (``~/.local/share`` when unset).
    """
    configured = _config.get('log_dir') or os.environ.get('ARENA_LOG_DIR')
    if configured:
        return str(Path(configured).expanduser())
    data_home = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
    return str(Path(data_home) / 'arena' / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Record settings for a module, empty dict if none configured."""
    return _config['modules'].get(module.lower(), {})


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module overrides
        log_dir: Directory for structured record files
    """
    _config['default_level'] = _level_from_string(level)
    for mod, mod_level in (modules or {}).items():
        _config['module_levels'][mod.lower()] = _level_from_string(mod_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    """Apply ARENA_LOG_* levels and ARENA_LOGGING_<MODULE>_<KEY> record settings."""
    for key, value in os.environ.items():
        if key == 'ARENA_LOG_LEVEL':
            _config['default_level'] = _level_from_string(value)
        elif key == 'ARENA_LOG_DIR':
            _config['log_dir'] = value
        elif key.startswith('ARENA_LOG_'):
            _config['module_levels'][key[len('ARENA_LOG_'):].lower()] = _level_from_string(value)
        elif key.startswith('ARENA_LOGGING_'):
            module, _, setting = key[len('ARENA_LOGGING_'):].lower().partition('_')
            if module and setting:
                _config['modules'].setdefault(module, {})[setting] = _parse_env_value(value)


_load_env_config()


# =============================================================================
# Record sinks
# =============================================================================

class LogSink(ABC):
    """Destination for structured (JSON-serializable) records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def flush(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class FileSink(LogSink):
    """
    Writes records as JSON Lines, one file per module.

    Files are named ``<session>_<module>.jsonl`` and opened on the first
    record. Each starts with a header line and gets a footer line on close.

    Args:
        log_dir: Directory for the files (default: get_log_dir())
        session_name: Prefix for file names (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, Any] = {}

    def _path(self, module: str) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        return self._log_dir / f"{self._session_name}_{module}.jsonl"

    def _write(self, module: str, record: Dict[str, Any]) -> None:
        self._files[module].write(json.dumps(record) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        if module not in self._files:
            path = self._path(module)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._files[module] = open(path, 'a', encoding='utf-8')
            self._write(module, {
                'type': 'header',
                'module': module,
                'session_name': self._session_name,
                'start_time': time.time(),
            })
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        self._write(module, record)

    def flush(self) -> None:
        for f in self._files.values():
            f.flush()

    def close(self) -> None:
        for module, f in self._files.items():
            self._write(module, {'type': 'footer', 'module': module, 'end_time': time.time()})
            f.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files opened so far, by module."""
        return {module: self._path(module) for module in self._files}


class NullSink(LogSink):
    """Discards records; used when a module's recording is off."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route a module's records to `sink`, replacing any previous one."""
    _sinks[module] = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Send a record to the module's sink.

    Returns:
        True if a sink took the record, False if none is registered
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink_for_environment(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if ARENA_LOGGING_<MODULE>_ENABLED is set, else NullSink."""
    if get_module_config(module).get('enabled') is True:
        return FileSink(session_name=session_name)
    return NullSink()


# =============================================================================
# Console loggers
# =============================================================================

class ArenaLogger:
    """Logger for one module. Prints ``[module] LEVEL: message`` to stdout."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level.name}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> ArenaLogger:
    """Cached logger for `module` (e.g. 'simulation', 'spawner')."""
    return ArenaLogger(module)
