"""Structured logging for the Brandkit API.

Everything is written to stdout, as JSON when ``LOG_FORMAT=json`` and as
plain text otherwise. Besides ``get_logger`` the module exposes three
event loggers so the same events always carry the same fields:

- ``db_logger``: connection failures (DSN password masked), slow
  queries/sessions, rolled back transactions, migration runs
- ``security_logger``: failed logins and denied project access
- ``export_logger``: generated and rejected brand exports
"""

import logging
import re
import sys
from datetime import UTC, datetime
from typing import Any

from pythonjsonlogger import jsonlogger

from brandkit.core.config import get_settings

# user:password@ in a DSN
_DSN_CREDENTIALS = re.compile(r"(://[^:/@]+:)([^@]+)(@)")

_QUIET_LOGGERS = ("uvicorn.access", "passlib", "multipart")


class CustomJsonFormatter(jsonlogger.JsonFormatter):  # type: ignore[name-defined]
    """JSON formatter adding timestamp, level, logger and service fields."""

    def __init__(self, *args: Any, service: str = "brandkit", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = self.service
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)


def mask_connection_string(conn_str: str) -> str:
    """Replace the password of a database URL with ``****``."""
    if not conn_str:
        return ""
    return _DSN_CREDENTIALS.sub(r"\1****\3", conn_str)


def setup_logging() -> None:
    """Install a single stdout handler on the root logger."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(
            CustomJsonFormatter(
                "%(timestamp)s %(level)s %(name)s %(message)s",
                service=settings.app_name.lower(),
            )
        )
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)


class DatabaseLogger:
    """Database events: connections, slow work, rollbacks, migrations."""

    def __init__(self) -> None:
        self.logger = get_logger("brandkit.database")

    def connection_error(self, error: Exception, connection_string: str) -> None:
        self.logger.error(
            "Database connection failed",
            extra={
                "connection_string": mask_connection_string(connection_string),
                "error_type": type(error).__name__,
                "error_message": str(error),
            },
        )

    def slow_query(
        self, query: str, duration_ms: float, table: str | None = None
    ) -> None:
        """Log at WARNING; ``query`` is cut to 500 characters."""
        self.logger.warning(
            "Slow query detected",
            extra={
                "duration_ms": round(duration_ms, 2),
                "query": query[:500],
                "table": table,
            },
        )

    def transaction_failure(
        self, error: Exception, table: str | None = None, context: str | None = None
    ) -> None:
        self.logger.error(
            "Transaction failed, rolling back",
            extra={
                "error_type": type(error).__name__,
                "error_message": str(error),
                "table": table,
                "rollback_context": context,
            },
        )

    def migration_start(self, version: str, description: str) -> None:
        self.logger.info(
            "Starting database migration",
            extra={"migration_version": version, "description": description},
        )

    def migration_end(self, version: str, success: bool) -> None:
        self.logger.log(
            logging.INFO if success else logging.ERROR,
            "Database migration completed" if success else "Database migration failed",
            extra={"migration_version": version, "success": success},
        )


class SecurityLogger:
    """Authentication and authorization failures, logged at WARNING."""

    def __init__(self) -> None:
        self.logger = get_logger("brandkit.security")

    def login_failed(self, username: str) -> None:
        # Usernames are user input; cap what ends up in the log.
        self.logger.warning(
            "Failed login attempt", extra={"username": username[:64]}
        )

    def access_denied(self, user_id: int, project_id: int, action: str) -> None:
        self.logger.warning(
            "Project access denied",
            extra={"user_id": user_id, "project_id": project_id, "action": action},
        )


class ExportLogger:
    """Brand export outcomes."""

    def __init__(self) -> None:
        self.logger = get_logger("brandkit.export")

    def export_generated(
        self, project_id: int, export_format: str, colors: int, typography: int
    ) -> None:
        self.logger.info(
            f"{export_format.upper()} exported",
            extra={
                "project_id": project_id,
                "export_format": export_format,
                "colors": colors,
                "typography": typography,
            },
        )

    def export_rejected(
        self,
        project_id: int,
        export_format: str,
        field: str,
        reason: str,
        request_id: str | None = None,
    ) -> None:
        self.logger.warning(
            f"{export_format.upper()} export failed",
            extra={
                "request_id": request_id,
                "project_id": project_id,
                "export_format": export_format,
                "field": field,
                "reason": reason,
            },
        )


db_logger = DatabaseLogger()
security_logger = SecurityLogger()
export_logger = ExportLogger()
