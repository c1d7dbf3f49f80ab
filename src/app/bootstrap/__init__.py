"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta as
implementações concretas (reCAPTCHA, SMTP, Telegram) aos canais de cada
site.

Uso:
    from app.bootstrap import build_server_context, initialize_app

    initialize_app(level="INFO")
    context = build_server_context(load_sites_config("config.yaml"))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.email import SmtpMailer
from api.connectors.http_base import DEFAULT_TIMEOUT_SECONDS, HttpClient, HttpClientConfig
from api.connectors.recaptcha import RecaptchaVerifier
from api.connectors.telegram import TelegramBotClient
from app.constants.service import SERVICE_NAME
from app.context import ServerContext
from app.infra.channels import MailChannel, TelegramChannel
from app.observability import get_correlation_id
from app.services.site_registry import SiteRegistry
from config.logging import configure_logging
from config.settings import MailSenderConfig, TelegramSenderConfig
from utils.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.protocols import (
        BotApiClientProtocol,
        ChallengeVerifierProtocol,
        DeliveryChannelProtocol,
        MailTransportProtocol,
    )
    from config.settings import ServerSettings, SiteConfig

DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app(level: str = DEFAULT_LOG_LEVEL, service_name: str = SERVICE_NAME) -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez, antes de carregar a configuração de sites.
    """
    configure_logging(
        level=level,
        service_name=service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em nível DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(settings: ServerSettings) -> None:
    """Valida settings do processo no startup.

    Raises:
        ConfigError: Se alguma setting for inválida (o processo não sobe)
    """
    errors = settings.validate()
    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": settings.environment,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise ConfigError(f"Configuração inválida para {settings.environment}:\n{details}")


def build_channel(
    site: SiteConfig,
    *,
    verifier: ChallengeVerifierProtocol,
    mailer: MailTransportProtocol,
    bot_client: BotApiClientProtocol,
) -> DeliveryChannelProtocol:
    """Cria o canal de entrega de um site conforme `sender.type`."""
    sender = site.sender
    if isinstance(sender, MailSenderConfig):
        return MailChannel(
            site_url=site.url,
            recaptcha_secret=site.recaptcha_secret,
            verifier=verifier,
            recipient=sender.mailto,
            username=sender.username,
            password=sender.password,
            hostname=sender.hostname,
            port=sender.port,
            transport=mailer,
        )
    if isinstance(sender, TelegramSenderConfig):
        return TelegramChannel(
            site_url=site.url,
            recaptcha_secret=site.recaptcha_secret,
            verifier=verifier,
            chat_id=sender.chat_id,
            bot_token=sender.bot_token,
            client=bot_client,
        )
    raise ConfigError(f"site {site.id}: tipo de sender não suportado")


def build_server_context(
    sites: Iterable[SiteConfig],
    *,
    http_config: HttpClientConfig | None = None,
) -> ServerContext:
    """Monta registro de sites e contexto do servidor.

    Args:
        sites: Sites carregados do arquivo de configuração
        http_config: Config HTTP compartilhada (reCAPTCHA e Telegram)

    Raises:
        ConfigError: ids duplicados ou fora do intervalo
    """
    http_client = HttpClient(http_config or HttpClientConfig())
    verifier = RecaptchaVerifier(http_client=http_client)
    bot_client = TelegramBotClient(http_client=http_client)
    mailer = SmtpMailer(timeout_seconds=DEFAULT_TIMEOUT_SECONDS)

    registry = SiteRegistry.from_entries(
        (
            site.id,
            build_channel(site, verifier=verifier, mailer=mailer, bot_client=bot_client),
        )
        for site in sites
    )
    logger.info(
        "site_registry_loaded",
        extra={
            "component": "bootstrap",
            "site_count": len(registry),
            "mail_sites": sum(1 for channel in registry.values() if channel.kind == "mail"),
            "telegram_sites": sum(
                1 for channel in registry.values() if channel.kind == "telegram"
            ),
        },
    )
    return ServerContext(registry=registry)
