"""Settings do processo servidor.

Carregadas de variáveis de ambiente; a CLI pode sobrescrever host, porta,
arquivo de sites e nível de log.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8080
DEFAULT_CONFIG_PATH = "config.yaml"
MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class ServerSettings:
    """Configurações do servidor HTTP.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        host: Interface de escuta
        port: Porta TCP de escuta
        config_path: Caminho do arquivo YAML de sites
        log_level: Nível de log
        drain_timeout_seconds: Limite de espera do drain (None = sem limite)
        cors_allowed_origins: Origens aceitas pelo CORS
    """

    environment: Environment = "development"
    service_name: str = "web-msg-handler"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    config_path: str = DEFAULT_CONFIG_PATH
    log_level: str = "INFO"
    drain_timeout_seconds: float | None = None
    cors_allowed_origins: tuple[str, ...] = ("*",)

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Valida configurações do servidor.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not self.host:
            errors.append("HOST não pode ser vazio")

        if not MIN_PORT <= self.port <= MAX_PORT:
            errors.append(f"PORT fora do intervalo {MIN_PORT}-{MAX_PORT}: {self.port}")

        if not self.config_path:
            errors.append("SITES_CONFIG_PATH não pode ser vazio")

        if self.drain_timeout_seconds is not None and self.drain_timeout_seconds <= 0:
            errors.append("DRAIN_TIMEOUT_SECONDS deve ser positivo")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_int(raw: str, default: int) -> int:
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_optional_float(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def _load_from_env() -> ServerSettings:
    """Carrega ServerSettings de variáveis de ambiente."""
    return ServerSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "web-msg-handler"),
        host=os.getenv("HOST", DEFAULT_HOST),
        port=_parse_int(os.getenv("PORT", str(DEFAULT_PORT)), DEFAULT_PORT),
        config_path=os.getenv("SITES_CONFIG_PATH", DEFAULT_CONFIG_PATH),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        drain_timeout_seconds=_parse_optional_float(os.getenv("DRAIN_TIMEOUT_SECONDS")),
        cors_allowed_origins=_parse_origins(os.getenv("CORS_ALLOWED_ORIGINS", "*")),
    )


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """Retorna instância cacheada de ServerSettings."""
    return _load_from_env()
