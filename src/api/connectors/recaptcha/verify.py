"""Verificação de token reCAPTCHA no endpoint siteverify.

Fluxo:
1. Serializa {secret, response} como JSON
2. Um único POST ao provedor (sem retry)
3. Lê {success, error-codes}

Qualquer falha (transporte, status >= 400, JSON inválido, success=false)
vira ChallengeVerificationError; o chamador não distingue os casos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpError
from utils.errors import ChallengeVerificationError

if TYPE_CHECKING:
    from api.connectors.http_base import HttpClientConfig

logger = logging.getLogger(__name__)

RECAPTCHA_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"


class RecaptchaVerifier:
    """Verificador compartilhado por todos os canais de entrega.

    Não guarda secrets: cada canal passa o seu próprio secret por chamada.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        verify_url: str = RECAPTCHA_VERIFY_URL,
    ) -> None:
        self._http = http_client or HttpClient()
        self._verify_url = verify_url

    async def verify(self, secret: str, response: str) -> None:
        """Confirma que o token do usuário passou no desafio.

        Args:
            secret: Secret reCAPTCHA do site
            response: Token enviado pelo formulário (g-recaptcha-response)

        Raises:
            ChallengeVerificationError: Se o provedor recusar ou a chamada falhar
        """
        try:
            data = await self._http.post_json(
                self._verify_url,
                json={"secret": secret, "response": response},
            )
        except HttpError as exc:
            raise ChallengeVerificationError(
                f"error doing request for recaptcha verification: {exc}"
            ) from exc

        if data.get("success") is True:
            return

        error_codes = _parse_error_codes(data)
        logger.debug(
            "recaptcha_rejected",
            extra={"error_codes": error_codes},
        )
        raise ChallengeVerificationError("recaptcha verification failed", error_codes)


def _parse_error_codes(data: dict[str, Any]) -> list[str]:
    raw_codes = data.get("error-codes") or []
    if not isinstance(raw_codes, list):
        return []
    return [str(code) for code in raw_codes]


def create_recaptcha_verifier(config: HttpClientConfig | None = None) -> RecaptchaVerifier:
    """Factory para o verificador com cliente HTTP padrão."""
    return RecaptchaVerifier(http_client=HttpClient(config))
