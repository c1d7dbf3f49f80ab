"""Loader do arquivo YAML de sites.

Cada site registra id, url, segredo do reCAPTCHA e o canal de entrega
(mail ou telegram). Toda falha vira ConfigError com o caminho e o motivo.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.services.site_registry import MAX_SITE_ID
from utils.errors import ConfigError

NonEmptyStr = Annotated[str, Field(min_length=1)]


class MailSenderConfig(BaseModel):
    """Credenciais SMTP e destinatário de um site."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["mail"] = "mail"
    mailto: NonEmptyStr
    username: NonEmptyStr
    password: NonEmptyStr = Field(repr=False)
    hostname: NonEmptyStr
    port: int = Field(ge=1, le=65535)


class TelegramSenderConfig(BaseModel):
    """Chat e token de bot de um site."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    type: Literal["telegram"] = "telegram"
    chat_id: NonEmptyStr = Field(alias="chatID")
    bot_token: NonEmptyStr = Field(alias="botToken", repr=False)


SenderConfig = Annotated[
    MailSenderConfig | TelegramSenderConfig,
    Field(discriminator="type"),
]


class SiteConfig(BaseModel):
    """Entrada de site do arquivo de configuração."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(ge=0, le=MAX_SITE_ID)
    url: NonEmptyStr
    recaptcha_secret: NonEmptyStr = Field(repr=False)
    sender: SenderConfig


class SitesFile(BaseModel):
    """Documento raiz: lista não vazia de sites."""

    model_config = ConfigDict(extra="forbid")

    sites: list[SiteConfig] = Field(min_length=1)


def load_sites_config(path: str | Path) -> list[SiteConfig]:
    """Carrega e valida o arquivo de sites.

    Args:
        path: Caminho do YAML

    Returns:
        Sites na ordem em que aparecem no arquivo

    Raises:
        ConfigError: arquivo ausente, YAML inválido ou schema inválido
    """
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"{config_path}: arquivo não encontrado") from exc
    except OSError as exc:
        raise ConfigError(f"{config_path}: falha ao ler arquivo ({exc})") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"{config_path}: YAML inválido ({exc})") from exc

    return parse_sites_config(data, source=str(config_path))


def parse_sites_config(data: Any, source: str = "<memory>") -> list[SiteConfig]:
    """Valida o documento já decodificado.

    ids duplicados são rejeitados pelo SiteRegistry ao montar o contexto.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: documento deve ser um mapeamento com a chave 'sites'")

    try:
        parsed = SitesFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{source}: configuração inválida ({_describe(exc)})") from exc

    return parsed.sites


def _describe(exc: ValidationError) -> str:
    """Resume erros do pydantic sem ecoar valores (podem ser segredos)."""
    parts = []
    for error in exc.errors(include_input=False, include_url=False):
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
