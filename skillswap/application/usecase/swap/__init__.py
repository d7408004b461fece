"""Swap request use cases."""

from .change_swap_status import (
    ChangeSwapStatusRequest,
    ChangeSwapStatusUseCase,
    SwapAction,
)
from .create_swap import CreateSwapRequest, CreateSwapUseCase
from .delete_swap import DeleteSwapRequest, DeleteSwapUseCase
from .get_swap import GetSwapRequest, GetSwapUseCase
from .list_swaps import (
    ListInboxRequest,
    ListInboxUseCase,
    ListSwapsRequest,
    ListSwapsUseCase,
    SwapListResponse,
)
from .swap_stats import GetSwapStatsRequest, GetSwapStatsUseCase, SwapStatsResponse

__all__ = [
    "ChangeSwapStatusRequest",
    "ChangeSwapStatusUseCase",
    "CreateSwapRequest",
    "CreateSwapUseCase",
    "DeleteSwapRequest",
    "DeleteSwapUseCase",
    "GetSwapRequest",
    "GetSwapStatsRequest",
    "GetSwapStatsUseCase",
    "GetSwapUseCase",
    "ListInboxRequest",
    "ListInboxUseCase",
    "ListSwapsRequest",
    "ListSwapsUseCase",
    "SwapAction",
    "SwapListResponse",
    "SwapStatsResponse",
]
