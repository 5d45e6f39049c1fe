"""User profile endpoints."""

from fastapi import APIRouter

from journalup.api.deps import UserInfoServiceDep
from journalup.api.v1.auth import CurrentUserDep
from journalup.schemas.auth import SuccessResponse
from journalup.schemas.user_info import UserInfoCreate, UserInfoOut, UserInfoUpdate

router = APIRouter()


@router.get("", response_model=UserInfoOut)
def get_user_info(user: CurrentUserDep, user_info_service: UserInfoServiceDep) -> UserInfoOut:
    return UserInfoOut.model_validate(user_info_service.get_user_info(user.id))


@router.post("", response_model=UserInfoOut)
def create_user_info(
    body: UserInfoCreate,
    user: CurrentUserDep,
    user_info_service: UserInfoServiceDep,
) -> UserInfoOut:
    """Create the caller's profile (409 if it already exists)."""
    return UserInfoOut.model_validate(user_info_service.create_user_info(user.id, body))


@router.patch("", response_model=UserInfoOut)
def update_user_info(
    body: UserInfoUpdate,
    user: CurrentUserDep,
    user_info_service: UserInfoServiceDep,
) -> UserInfoOut:
    return UserInfoOut.model_validate(user_info_service.update_user_info(user.id, body))


@router.delete("", response_model=SuccessResponse)
def delete_user_info(user: CurrentUserDep, user_info_service: UserInfoServiceDep) -> SuccessResponse:
    user_info_service.delete_user_info(user.id)
    return SuccessResponse()
