"""Logging estruturado JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="web-msg-handler")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("form_request_succeeded", extra={"site_id": 42})

Campos presentes em todo log: correlation_id, service, level, logger,
message, asctime. Nunca registrar corpo de mensagem, e-mail do remetente,
senhas ou tokens.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
