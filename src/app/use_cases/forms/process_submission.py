"""Use case de processamento de um formulário recebido.

Ordem (a primeira falha encerra):
1. Parse do JSON → SubmittedForm
2. Validação sintática do email
3. Verificação do desafio pelo canal do site
4. Sanitização de nome e mensagem (email segue como veio)
5. Entrega pelo canal

O use case não conhece HTTP: devolve SubmissionResult com um error_code
que a rota traduz em status.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import ValidationError

from api.normalizers.form import sanitize_message, sanitize_name
from api.validators.email import is_valid_email
from app.domain.form import SubmittedForm
from utils.errors import ChallengeVerificationError, DeliveryError

if TYPE_CHECKING:
    from app.protocols import DeliveryChannelProtocol

logger = logging.getLogger(__name__)


class SubmissionErrorCode(StrEnum):
    """Falhas possíveis do pipeline."""

    MALFORMED_JSON = "MALFORMED_JSON"
    INVALID_EMAIL = "INVALID_EMAIL"
    CHALLENGE_FAILED = "CHALLENGE_FAILED"
    DELIVERY_FAILED = "DELIVERY_FAILED"


# Mensagens expostas ao cliente; detalhes internos ficam só nos logs
ERROR_MESSAGES: dict[SubmissionErrorCode, str] = {
    SubmissionErrorCode.MALFORMED_JSON: "malformed JSON",
    SubmissionErrorCode.INVALID_EMAIL: "invalid email",
    SubmissionErrorCode.CHALLENGE_FAILED: "recaptcha verification failed",
    SubmissionErrorCode.DELIVERY_FAILED: "error sending message",
}


@dataclass(frozen=True)
class SubmissionResult:
    """Resultado do pipeline de um formulário."""

    success: bool
    error_code: SubmissionErrorCode | None = None

    @property
    def error_message(self) -> str | None:
        if self.error_code is None:
            return None
        return ERROR_MESSAGES[self.error_code]


class ProcessSubmissionUseCase:
    """Orquestra parse, validação, desafio, sanitização e entrega."""

    async def execute(
        self,
        channel: DeliveryChannelProtocol,
        raw_body: bytes,
    ) -> SubmissionResult:
        """Processa o corpo bruto de um POST para o canal do site."""
        try:
            form = SubmittedForm.model_validate_json(raw_body)
        except ValidationError as exc:
            logger.debug("form_malformed_json", extra={"error_count": exc.error_count()})
            return _failed(SubmissionErrorCode.MALFORMED_JSON)

        if not is_valid_email(form.email):
            logger.debug("form_invalid_email")
            return _failed(SubmissionErrorCode.INVALID_EMAIL)

        try:
            await channel.check_challenge(form.challenge_response)
        except ChallengeVerificationError as exc:
            logger.debug(
                "form_challenge_failed",
                extra={"channel_kind": channel.kind, "error": str(exc)},
            )
            return _failed(SubmissionErrorCode.CHALLENGE_FAILED)

        try:
            await channel.send(
                sanitize_name(form.name),
                form.email,
                sanitize_message(form.message),
            )
        except DeliveryError as exc:
            logger.error(
                "form_delivery_failed",
                extra={"channel_kind": channel.kind, "error": str(exc)},
            )
            return _failed(SubmissionErrorCode.DELIVERY_FAILED)

        logger.debug("form_delivered", extra={"channel_kind": channel.kind})
        return SubmissionResult(success=True)


def _failed(code: SubmissionErrorCode) -> SubmissionResult:
    return SubmissionResult(success=False, error_code=code)
