"""Connector reCAPTCHA: verificação anti-automação no provedor."""

from .verify import RECAPTCHA_VERIFY_URL, RecaptchaVerifier

__all__ = ["RECAPTCHA_VERIFY_URL", "RecaptchaVerifier"]
