"""Agregador de settings do web-msg-handler.

Re-exporta settings do processo e o loader do arquivo de sites.
"""

from __future__ import annotations

from config.settings.server import (
    Environment,
    ServerSettings,
    get_server_settings,
)
from config.settings.sites import (
    MailSenderConfig,
    SiteConfig,
    TelegramSenderConfig,
    load_sites_config,
    parse_sites_config,
)

__all__ = [
    "Environment",
    "MailSenderConfig",
    "ServerSettings",
    "SiteConfig",
    "TelegramSenderConfig",
    "get_server_settings",
    "load_sites_config",
    "parse_sites_config",
]
