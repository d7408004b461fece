"""Account profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Query, Response, UploadFile
from pydantic import BaseModel

from skillswap.application.usecase.account import (
    DeleteAccountRequest,
    DeleteAccountUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    GetUserFeedbackRequest,
    GetUserFeedbackUseCase,
    RemoveProfilePhotoRequest,
    RemoveProfilePhotoUseCase,
    SearchAccountsRequest,
    SearchAccountsUseCase,
    UpdateAvailabilityRequest,
    UpdateAvailabilityUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UploadProfilePhotoRequest,
    UploadProfilePhotoUseCase,
)
from skillswap.application.usecase.account.get_user_feedback import (
    GetUserFeedbackResponse,
)
from skillswap.application.usecase.account.profile_photo import ProfilePhotoResponse
from skillswap.application.usecase.account.search_accounts import (
    SearchAccountsResponse,
)
from skillswap.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from skillswap.application.usecase.views import ApiModel, PrivateProfileView, ProfileView
from skillswap.domain.service import JWTService
from skillswap.domain.value import Availability
from skillswap.interface.api.envelope import ApiResponse
from skillswap.interface.api.security import (
    AuthToken,
    optional_account_id,
    require_account_id,
)

from .auth import COOKIE_NAME

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(ApiModel):
    """API request for updating the caller's profile.

    Omitted fields are left unchanged.
    """

    name: str | None = None
    location: str | None = None
    skills_offered: list[str] | None = None
    skills_wanted: list[str] | None = None
    availability: Availability | None = None
    is_public: bool | None = None


class UpdateAvailabilityAPIRequest(BaseModel):
    availability: Availability


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


@router.get("/search", response_model=ApiResponse[SearchAccountsResponse])
async def search_users(
    search_accounts_use_case: FromDishka[SearchAccountsUseCase],
    q: str | None = None,
    skills_offered: str | None = Query(default=None, alias="skillsOffered"),
    skills_wanted: str | None = Query(default=None, alias="skillsWanted"),
    availability: Availability | None = None,
    location: str | None = None,
    page: int = 1,
    limit: int = 10,
) -> ApiResponse[SearchAccountsResponse]:
    """Search public profiles.

    Skill filters take comma-separated names and match any of them.

    Example:
        GET /api/users/search?q=guitar&skillsWanted=spanish,french&page=1
    """
    result = await search_accounts_use_case.execute(
        SearchAccountsRequest(
            q=q,
            skills_offered=_split_csv(skills_offered),
            skills_wanted=_split_csv(skills_wanted),
            availability=availability,
            location=location,
            page=page,
            limit=limit,
        )
    )
    return ApiResponse(message="Users found", data=result)


@router.get("/me", response_model=ApiResponse[PrivateProfileView])
async def get_my_profile(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> ApiResponse[PrivateProfileView]:
    account_id = require_account_id(jwt_service, token)
    profile = await get_current_user_use_case.execute(
        GetCurrentUserRequest(account_id=account_id)
    )
    return ApiResponse(message="Profile retrieved", data=profile)


@router.put("/me", response_model=ApiResponse[PrivateProfileView])
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> ApiResponse[PrivateProfileView]:
    """Update the caller's profile.

    Example:
        PUT /api/users/me

        Request:
        {"location": "Lisbon", "skillsOffered": ["Guitar", "Python"]}
    """
    account_id = require_account_id(jwt_service, token)
    profile = await update_profile_use_case.execute(
        UpdateProfileRequest(
            account_id=account_id, **request.model_dump(exclude_unset=True)
        )
    )
    return ApiResponse(message="Profile updated successfully", data=profile)


@router.put("/me/availability", response_model=ApiResponse[PrivateProfileView])
async def update_my_availability(
    request: UpdateAvailabilityAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    update_availability_use_case: FromDishka[UpdateAvailabilityUseCase],
) -> ApiResponse[PrivateProfileView]:
    account_id = require_account_id(jwt_service, token)
    profile = await update_availability_use_case.execute(
        UpdateAvailabilityRequest(
            account_id=account_id, availability=request.availability
        )
    )
    return ApiResponse(message="Availability updated", data=profile)


@router.post("/me/photo", response_model=ApiResponse[ProfilePhotoResponse])
async def upload_profile_photo(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    upload_profile_photo_use_case: FromDishka[UploadProfilePhotoUseCase],
    photo: UploadFile = File(...),
) -> ApiResponse[ProfilePhotoResponse]:
    """Upload a JPEG, PNG, GIF or WebP profile photo (multipart field ``photo``)."""
    account_id = require_account_id(jwt_service, token)
    content = await photo.read()
    result = await upload_profile_photo_use_case.execute(
        UploadProfilePhotoRequest(
            account_id=account_id, content=content, content_type=photo.content_type
        )
    )
    return ApiResponse(message="Profile photo uploaded successfully", data=result)


@router.delete("/me/photo", response_model=ApiResponse[ProfilePhotoResponse])
async def remove_profile_photo(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    remove_profile_photo_use_case: FromDishka[RemoveProfilePhotoUseCase],
) -> ApiResponse[ProfilePhotoResponse]:
    account_id = require_account_id(jwt_service, token)
    result = await remove_profile_photo_use_case.execute(
        RemoveProfilePhotoRequest(account_id=account_id)
    )
    return ApiResponse(message="Profile photo removed successfully", data=result)


@router.delete("/me", response_model=ApiResponse[None])
async def delete_my_account(
    response: Response,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
) -> ApiResponse[None]:
    """Delete the caller's account, swaps, notifications and feedback."""
    account_id = require_account_id(jwt_service, token)
    await delete_account_use_case.execute(DeleteAccountRequest(account_id=account_id))
    response.delete_cookie(key=COOKIE_NAME, path="/")
    return ApiResponse(message="Account deleted successfully")


@router.get("/me/feedback", response_model=ApiResponse[GetUserFeedbackResponse])
async def get_my_feedback(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_user_feedback_use_case: FromDishka[GetUserFeedbackUseCase],
    page: int = 1,
    limit: int = 10,
) -> ApiResponse[GetUserFeedbackResponse]:
    """Feedback the caller has received, whether or not the profile is public."""
    account_id = require_account_id(jwt_service, token)
    result = await get_user_feedback_use_case.execute(
        GetUserFeedbackRequest(account_id=account_id, page=page, limit=limit)
    )
    return ApiResponse(message="Feedback retrieved", data=result)


@router.get("/{user_id}", response_model=ApiResponse[ProfileView])
async def get_user_profile(
    user_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ApiResponse[ProfileView]:
    """Get a profile; private profiles are only visible to their owner."""
    profile = await get_profile_use_case.execute(
        GetProfileRequest(
            account_id=str(user_id),
            viewer_id=optional_account_id(jwt_service, token),
        )
    )
    return ApiResponse(message="Profile retrieved", data=profile)


@router.get("/{user_id}/feedback", response_model=ApiResponse[GetUserFeedbackResponse])
async def get_user_feedback(
    user_id: UUID,
    get_user_feedback_use_case: FromDishka[GetUserFeedbackUseCase],
    page: int = 1,
    limit: int = 10,
) -> ApiResponse[GetUserFeedbackResponse]:
    result = await get_user_feedback_use_case.execute(
        GetUserFeedbackRequest(account_id=str(user_id), page=page, limit=limit)
    )
    return ApiResponse(message="Feedback retrieved", data=result)
