"""Logging helpers that attach JSON context to export messages."""

import logging
import json
from typing import Any, Dict, Optional

class StructuredLogger:
    """Logger that appends keyword context to messages as ``msg | {json}``."""

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        self.logger = logging.getLogger(name)
        self.context = dict(context or {})

    def bind(self, **context) -> 'StructuredLogger':
        """Return a logger for the same name that always adds ``context``."""
        return StructuredLogger(self.logger.name, {**self.context, **context})

    def debug(self, msg: str, **context):
        self._log(logging.DEBUG, msg, **context)

    def info(self, msg: str, **context):
        self._log(logging.INFO, msg, **context)

    def error(self, msg: str, **context):
        self._log(logging.ERROR, msg, **context)

    def _log(self, level: int, msg: str, **context):
        if not self.logger.isEnabledFor(level):
            return
        merged = {**self.context, **context}
        if merged:
            msg = f"{msg} | {json.dumps(merged, default=str)}"
        self.logger.log(level, msg)

# Shared by the export modules
export_logger = StructuredLogger("objwriter.export")
