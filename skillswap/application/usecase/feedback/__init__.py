"""Feedback use cases."""

from .get_pending_feedback import (
    GetPendingFeedbackRequest,
    GetPendingFeedbackUseCase,
    PendingFeedbackResponse,
)
from .get_swap_feedback import (
    GetSwapFeedbackRequest,
    GetSwapFeedbackUseCase,
    SwapFeedbackResponse,
)
from .submit_feedback import SubmitFeedbackRequest, SubmitFeedbackUseCase
from .update_feedback import (
    DeleteFeedbackRequest,
    DeleteFeedbackUseCase,
    UpdateFeedbackRequest,
    UpdateFeedbackUseCase,
)

__all__ = [
    "DeleteFeedbackRequest",
    "DeleteFeedbackUseCase",
    "GetPendingFeedbackRequest",
    "GetPendingFeedbackUseCase",
    "GetSwapFeedbackRequest",
    "GetSwapFeedbackUseCase",
    "PendingFeedbackResponse",
    "SubmitFeedbackRequest",
    "SubmitFeedbackUseCase",
    "SwapFeedbackResponse",
    "UpdateFeedbackRequest",
    "UpdateFeedbackUseCase",
]
