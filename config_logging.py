#!/usr/bin/env python3
"""
Code Spell Engine Configuration & Logging Module
================================================
Centralized application configuration, structured logging, and the error
hierarchy shared by the spell checking engine and its HTTP surface.
"""

import os
import sys
import json
import logging
import uuid
import time
import functools
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Callable
from pathlib import Path
from dataclasses import dataclass, field
from contextlib import contextmanager
import threading

# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================
DEFAULT_PORT = 5060                 # Default HTTP port for the editor API
DEFAULT_MAX_TEXT_KB = 512           # Largest source text accepted by /check
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB max per log file
LOG_BACKUP_COUNT = 5                # Number of log backup files to keep

DEFAULT_MAX_TEXT_BYTES = DEFAULT_MAX_TEXT_KB * 1024

VERSION = "1.0.0"


# =============================================================================
# ENVIRONMENT CONFIGURATION
# =============================================================================

@dataclass
class AppConfig:
    """Application configuration with local-only defaults."""

    # Server settings
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    debug: bool = False

    # Request limits
    max_content_length: int = DEFAULT_MAX_TEXT_BYTES

    # Paths
    log_dir: Path = field(default_factory=lambda: Path(__file__).parent / 'logs')

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # Options: json, text
    log_to_file: bool = False
    log_to_console: bool = True

    def __post_init__(self):
        if self.log_to_file:
            self.log_dir.mkdir(exist_ok=True)

        # Force debug=False in production environment
        if os.environ.get('CSE_ENV', 'development').lower() == 'production':
            self.debug = False
            self.log_level = "WARNING"

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load configuration from environment variables."""
        return cls(
            host=os.environ.get('CSE_HOST', '127.0.0.1'),
            port=int(os.environ.get('CSE_PORT', str(DEFAULT_PORT))),
            debug=os.environ.get('CSE_DEBUG', 'false').lower() == 'true',
            max_content_length=int(os.environ.get('CSE_MAX_TEXT', str(DEFAULT_MAX_TEXT_BYTES))),
            log_level=os.environ.get('CSE_LOG_LEVEL', 'INFO'),
            log_format=os.environ.get('CSE_LOG_FORMAT', 'json'),
            log_to_file=os.environ.get('CSE_LOG_TO_FILE', 'false').lower() == 'true',
        )

    def validate(self) -> tuple:
        """Validate configuration and return (is_valid, errors)."""
        errors = []

        if self.debug and os.environ.get('CSE_ENV') == 'production':
            errors.append("Debug mode cannot be enabled in production")

        if self.log_format not in ('json', 'text'):
            errors.append(f"Invalid log_format: {self.log_format}. Must be 'json' or 'text'")

        if not hasattr(logging, self.log_level.upper()):
            errors.append(f"Invalid log_level: {self.log_level}")

        if self.max_content_length <= 0:
            errors.append("Max content length must be positive")

        return (len(errors) == 0, errors)


# Global config instance
_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Get or create the global configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config():
    """Reset the global configuration (for testing)."""
    global _config
    _config = None


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

class StructuredLogger:
    """Thread-safe structured JSON logger with correlation IDs."""

    _local = threading.local()

    def __init__(self, name: str, config: Optional[AppConfig] = None):
        self.name = name
        self.config = config or get_config()
        self._setup_logger()

    def _setup_logger(self):
        """Configure the underlying Python logger."""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(getattr(logging, self.config.log_level.upper()))
        self.logger.handlers.clear()
        self.logger.propagate = False

        if self.config.log_format == 'json':
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
            )

        if self.config.log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if self.config.log_to_file:
            from logging.handlers import RotatingFileHandler
            log_file = self.config.log_dir / f"{self.name.lower()}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    @classmethod
    def set_correlation_id(cls, correlation_id: str):
        """Set correlation ID for current thread."""
        cls._local.correlation_id = correlation_id

    @classmethod
    def get_correlation_id(cls) -> str:
        """Get correlation ID for current thread."""
        return getattr(cls._local, 'correlation_id', None) or str(uuid.uuid4())[:8]

    @classmethod
    def new_correlation_id(cls) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())[:12]
        cls.set_correlation_id(correlation_id)
        return correlation_id

    def _build_log_record(self, level: str, message: str, **kwargs) -> Dict[str, Any]:
        """Build a structured log record."""
        return {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': level,
            'logger': self.name,
            'correlation_id': self.get_correlation_id(),
            'message': message,
            **kwargs
        }

    def _emit(self, level: int, level_name: str, message: str, exc_info: bool = False, **kwargs):
        record = self._build_log_record(level_name, message, **kwargs)
        if exc_info:
            import traceback
            record['traceback'] = traceback.format_exc()
        text = json.dumps(record, default=str) if self.config.log_format == 'json' else message
        self.logger.log(level, text, exc_info=exc_info)

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self._emit(logging.DEBUG, 'DEBUG', message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self._emit(logging.INFO, 'INFO', message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self._emit(logging.WARNING, 'WARNING', message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs):
        """Log error message with optional exception info."""
        self._emit(logging.ERROR, 'ERROR', message, exc_info=exc_info, **kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with full traceback."""
        self.error(message, exc_info=True, **kwargs)

    @contextmanager
    def log_operation(self, operation: str, **context):
        """Context manager for logging operation start/end with timing."""
        start_time = time.time()
        self.debug(f"{operation} started", operation=operation, status='started', **context)
        try:
            yield
            duration_ms = (time.time() - start_time) * 1000
            self.debug(f"{operation} completed", operation=operation, status='completed',
                       duration_ms=round(duration_ms, 2), **context)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self.error(f"{operation} failed: {e}", operation=operation, status='failed',
                       duration_ms=round(duration_ms, 2), exc_info=True, **context)
            raise


class JsonFormatter(logging.Formatter):
    """JSON log formatter.

    StructuredLogger already serializes its own records; anything else that
    reaches this handler is wrapped here.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if message.startswith('{'):
            return message

        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': message,
        }

        if record.exc_info:
            log_data['traceback'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


_loggers: Dict[str, StructuredLogger] = {}
_loggers_lock = threading.Lock()


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance (one per name)."""
    with _loggers_lock:
        logger = _loggers.get(name)
        if logger is None:
            logger = StructuredLogger(name, get_config())
            _loggers[name] = logger
        return logger


# =============================================================================
# ERROR HANDLING UTILITIES
# =============================================================================

class CodeSpellError(Exception):
    """Base exception for the code spell engine."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR",
                 status_code: int = 500, details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response dict."""
        return {
            'success': False,
            'error': {
                'code': self.code,
                'message': self.message,
                'details': self.details
            }
        }


class ValidationError(CodeSpellError):
    """Input validation error."""
    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400,
                         details={'field': field, **kwargs})


class UnsupportedLanguageError(CodeSpellError):
    """Language identifier outside the supported set (configuration error)."""
    def __init__(self, language: Any, supported: tuple = ()):
        super().__init__(
            f"Unsupported language: {language!r}. Supported: {', '.join(supported)}",
            code="UNSUPPORTED_LANGUAGE", status_code=400,
            details={'language': language, 'supported': list(supported)}
        )
        self.language = language


class ProcessingError(CodeSpellError):
    """Unexpected failure while checking text."""
    def __init__(self, message: str, stage: Optional[str] = None, **kwargs):
        super().__init__(message, code="PROCESSING_ERROR", status_code=500,
                         details={'stage': stage, **kwargs})


def handle_errors(logger: Optional[StructuredLogger] = None):
    """Decorator for standardized error handling."""
    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger or get_logger(func.__module__)
            try:
                return func(*args, **kwargs)
            except CodeSpellError:
                raise
            except ValueError as e:
                _logger.error(f"Validation error: {e}", exc_info=True)
                raise ValidationError(str(e))
            except Exception as e:
                _logger.exception(f"Unexpected error in {func.__name__}: {e}")
                raise ProcessingError(f"An unexpected error occurred: {type(e).__name__}")
        return wrapper
    return decorator
