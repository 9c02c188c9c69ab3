"""Environment configuration and logging setup.

Environment variables:
    RECEIPT_COLUMNS: Printed receipt width (default: 40)
    RECEIPT_DECIMAL_POINT: Decimal separator for prices (default: ".")
    RECEIPT_GROUP_SEPARATOR: Thousands separator for prices (default: ",")
    LOG_LEVEL: structlog filtering level name (default: INFO)
"""

import logging
import os
from dataclasses import dataclass

import structlog

from .errors import InvalidArgumentError
from .formatting import EN_GB, PriceFormat
from .validation import require_not_empty, require_positive

DEFAULT_COLUMNS = 40
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class PrinterConfig:
    columns: int = DEFAULT_COLUMNS
    price_format: PriceFormat = EN_GB


def get_printer_config() -> PrinterConfig:
    """Read receipt printer settings from the environment.

    Raises:
        InvalidArgumentError: If RECEIPT_COLUMNS is not a positive integer or
            a separator is set to an empty string.
    """
    raw_columns = os.environ.get("RECEIPT_COLUMNS", str(DEFAULT_COLUMNS))
    try:
        columns = int(raw_columns)
    except ValueError as e:
        raise InvalidArgumentError(f"RECEIPT_COLUMNS={raw_columns!r}", e) from e
    require_positive(columns, "RECEIPT_COLUMNS must be positive")

    decimal_point = os.environ.get("RECEIPT_DECIMAL_POINT", EN_GB.decimal_point)
    group_separator = os.environ.get("RECEIPT_GROUP_SEPARATOR", EN_GB.group_separator)
    require_not_empty(decimal_point, "RECEIPT_DECIMAL_POINT must not be empty")

    return PrinterConfig(
        columns=columns,
        price_format=PriceFormat(decimal_point=decimal_point, group_separator=group_separator),
    )


def get_log_level() -> int:
    """Resolve LOG_LEVEL to a numeric logging level."""
    name = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, name, None)
    if not isinstance(level, int):
        raise InvalidArgumentError(f"LOG_LEVEL={name!r}")
    return level


def configure_logging() -> None:
    """Configure structlog with JSON rendering and ISO timestamps."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
