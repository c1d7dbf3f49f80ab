"""Entrypoint de linha de comando (`web-msg-handler`).

Sequência de startup: logging → settings → arquivo de sites → contexto →
app FastAPI → servidor uvicorn com drain. Erros de configuração encerram
o processo com código 1 antes do bind da porta.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import TYPE_CHECKING

import uvicorn

from app.app import create_app
from app.bootstrap import build_server_context, initialize_app, validate_runtime_settings
from app.bootstrap.server import DrainingServer
from app.constants.service import SERVICE_NAME, __version__
from config.logging.config import VALID_LOG_LEVELS
from config.settings import ServerSettings, get_server_settings, load_sites_config
from utils.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

EXIT_OK = 0
EXIT_FAILURE = 1

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SERVICE_NAME,
        description="Recebe formulários de contato e entrega por email ou Telegram.",
    )
    parser.add_argument("--config", help="arquivo YAML de sites (padrão: SITES_CONFIG_PATH)")
    parser.add_argument("--port", help="porta de escuta (padrão: PORT ou 8080)")
    parser.add_argument("--host", help="interface de escuta (padrão: HOST ou 0.0.0.0)")
    parser.add_argument("--verbose", action="store_true", help="logs em nível DEBUG")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def apply_overrides(settings: ServerSettings, args: argparse.Namespace) -> ServerSettings:
    """Aplica as flags da CLI sobre as settings de ambiente.

    Raises:
        ConfigError: Se --port não for um inteiro
    """
    overrides: dict[str, object] = {}
    if args.config:
        overrides["config_path"] = args.config
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        try:
            overrides["port"] = int(args.port)
        except ValueError as exc:
            raise ConfigError(f"porta inválida: {args.port}") from exc
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return dataclasses.replace(settings, **overrides)  # type: ignore[arg-type]


def main(argv: Sequence[str] | None = None) -> int:
    """Executa o servidor até o fim do drain.

    Returns:
        Código de saída do processo
    """
    args = build_parser().parse_args(argv)
    settings = get_server_settings()
    log_level = "DEBUG" if args.verbose else settings.log_level
    initialize_app(
        level=log_level if log_level in VALID_LOG_LEVELS else "INFO",
        service_name=settings.service_name or SERVICE_NAME,
    )

    try:
        settings = apply_overrides(settings, args)
        validate_runtime_settings(settings)
        sites = load_sites_config(settings.config_path)
        context = build_server_context(sites)
    except ConfigError as exc:
        logger.critical("startup_config_failed", extra={"error": str(exc)})
        return EXIT_FAILURE

    server = DrainingServer(
        uvicorn.Config(
            create_app(context, settings),
            host=settings.host,
            port=settings.port,
            log_config=None,
            lifespan="on",
        ),
        coordinator=context.coordinator,
        drain_timeout_seconds=settings.drain_timeout_seconds,
    )
    logger.info(
        "server_starting",
        extra={"host": settings.host, "port": settings.port, "site_count": len(context.registry)},
    )
    try:
        server.run()
    except SystemExit as exc:
        # uvicorn encerra com sys.exit(1) quando o bind falha
        logger.critical("server_start_failed", extra={"exit_code": exc.code})
        return EXIT_FAILURE if exc.code else EXIT_OK

    if not server.started:
        logger.critical("server_start_failed", extra={"exit_code": EXIT_FAILURE})
        return EXIT_FAILURE

    logger.info("server_stopped")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
