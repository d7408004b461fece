"""Account use cases."""

from .delete_account import DeleteAccountRequest, DeleteAccountUseCase
from .get_profile import GetProfileRequest, GetProfileUseCase
from .get_user_feedback import GetUserFeedbackRequest, GetUserFeedbackUseCase
from .profile_photo import (
    IMAGE_TYPES,
    RemoveProfilePhotoRequest,
    RemoveProfilePhotoUseCase,
    UploadProfilePhotoRequest,
    UploadProfilePhotoUseCase,
)
from .search_accounts import SearchAccountsRequest, SearchAccountsUseCase
from .update_profile import (
    UpdateAvailabilityRequest,
    UpdateAvailabilityUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)

__all__ = [
    "DeleteAccountRequest",
    "DeleteAccountUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "GetUserFeedbackRequest",
    "GetUserFeedbackUseCase",
    "IMAGE_TYPES",
    "RemoveProfilePhotoRequest",
    "RemoveProfilePhotoUseCase",
    "SearchAccountsRequest",
    "SearchAccountsUseCase",
    "UpdateAvailabilityRequest",
    "UpdateAvailabilityUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UploadProfilePhotoRequest",
    "UploadProfilePhotoUseCase",
]
