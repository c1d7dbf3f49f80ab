"""Casos de uso de formulários de contato."""

from .process_submission import (
    ProcessSubmissionUseCase,
    SubmissionErrorCode,
    SubmissionResult,
)

__all__ = ["ProcessSubmissionUseCase", "SubmissionErrorCode", "SubmissionResult"]
