from .logger_factory_service import LoggerFactoryService, configure_logging, get_logger
from .redaction_service import redact_dict, redact_text, redact_token

__all__ = [
    "LoggerFactoryService",
    "configure_logging",
    "get_logger",
    "redact_dict",
    "redact_text",
    "redact_token",
]
