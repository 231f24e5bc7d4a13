import json as _json
import logging
import sys
from typing import IO, Any, Dict, Optional

from .value import ErrorValue

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# LogRecord attribute carrying the text of a logged ErrorValue
ERROR_VALUE_ATTR = "error_value"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        error_text = getattr(record, ERROR_VALUE_ATTR, None)
        if error_text is not None:
            payload[ERROR_VALUE_ATTR] = error_text
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return _json.dumps(payload, ensure_ascii=False)


def setup_logging(
    *,
    json_logs: bool = False,
    verbose: bool | None = None,
    quiet: bool | None = None,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Configure root logging and return the installed handler.

    - json_logs: emit JSON lines instead of the plain text format
    - verbose: DEBUG level if True
    - quiet: WARNING level if True (wins over verbose)
    - stream: destination, stderr when omitted so command output stays parseable
    Default level is INFO when neither verbose nor quiet is set.
    """
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    if quiet:
        level = max(level, logging.WARNING)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    if json_logs:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    root.addHandler(handler)
    return handler


def log_error_value(
    logger: logging.Logger, error: ErrorValue, *, level: int = logging.WARNING
) -> None:
    """Log an ErrorValue's message, attaching it to the record for JSON output."""
    logger.log(level, "%s", error.message, extra={ERROR_VALUE_ATTR: error.message})
