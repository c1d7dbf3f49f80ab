"""Canais de entrega concretos (email e Telegram).

Cada variante carrega o secret reCAPTCHA do seu site e é imutável
após a construção no bootstrap.
"""

from .base import ChallengeProtectedChannel
from .mail import MailChannel
from .telegram import TelegramChannel

__all__ = ["ChallengeProtectedChannel", "MailChannel", "TelegramChannel"]
