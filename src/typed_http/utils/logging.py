"""Logging do pacote typed_http."""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "typed_http"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _file_handler(level: str, log_file: str | Path) -> dict[str, Any]:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": "standard",
        "filename": str(log_path),
        "maxBytes": 5_242_880,  # 5MB
        "backupCount": 3,
        "encoding": "utf-8",
    }


def setup_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
    format: str = DEFAULT_FORMAT,
) -> None:
    """
    Configura apenas o logger "typed_http"; o logger raiz não é alterado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Arquivo rotativo adicional (None para apenas console)
        format: Formato das mensagens
    """
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "standard",
            "stream": sys.stdout,
        },
    }
    if log_file:
        handlers["file"] = _file_handler(level, log_file)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {"format": format, "datefmt": "%Y-%m-%d %H:%M:%S"},
            },
            "handlers": handlers,
            "loggers": {
                PACKAGE_LOGGER: {
                    "handlers": list(handlers),
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )
    logging.getLogger(PACKAGE_LOGGER).debug(f"Logging configurado (level: {level})")


def get_logger(name: str) -> logging.Logger:
    """Retorna logger com nome qualificado (geralmente __name__)."""
    return logging.getLogger(name)
