"""
User Account Endpoints.

Administrator account management, the signed-in user's own profile and
settings, and avatar upload.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from mylife_companion.core.database.entities.users import User, UserPreference
from mylife_companion.core.logging_config import get_logger
from mylife_companion.core.models.io import (
    AppearanceSettings,
    AvatarUploadResponse,
    MessageResponse,
    NotificationSettings,
    PrivacySettings,
    ProfileRead,
    ProfileUpdate,
    UserCreate,
    UserRead,
)
from mylife_companion.server.core.config import settings
from mylife_companion.server.services.avatars import AvatarRejectedError, save_avatar
from mylife_companion.server.services.deps import (
    AdminDep,
    AdminOrSelfDep,
    CurrentUserDep,
    ReposDep,
)

from .auth import register_user

logger = get_logger(__name__)

router = APIRouter()

PROFILE_FIELDS = ("phone", "school", "grade", "bio")
ACCOUNT_FIELDS = ("full_name", "avatar")


def _profile(user: User, preference: Optional[UserPreference]) -> ProfileRead:
    extras = {field: (getattr(preference, field, None) or "") for field in PROFILE_FIELDS}
    return ProfileRead(**UserRead.model_validate(user).model_dump(), **extras)


@router.get(
    "",
    response_model=list[UserRead],
    summary="List Users",
    description="List every account. Administrators only.",
    responses={403: {"description": "Caller is not an administrator"}},
)
async def list_users(_: AdminDep, repos: ReposDep) -> list[UserRead]:
    users = await repos.users.list()
    return [UserRead.model_validate(user) for user in users]


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Create an account with an explicit role and status. Administrators only.",
    responses={
        400: {"description": "Missing field, or username/email already in use"},
        403: {"description": "Caller is not an administrator"},
    },
)
async def create_user(payload: UserCreate, admin: AdminDep, repos: ReposDep) -> UserRead:
    """
    Create a user account on behalf of someone.

    - **role**: ``user`` (default) or ``admin``.
    - **status**: ``active`` (default), ``inactive`` or ``suspended``.
    """
    user = await register_user(
        repos,
        payload.username,
        payload.email,
        payload.password,
        full_name=payload.full_name,
        role=payload.role.value,
        status=payload.status.value,
    )
    logger.info(f"Administrator {admin.id} created user {user.id}")
    return UserRead.model_validate(user)


@router.get(
    "/me",
    response_model=ProfileRead,
    summary="Get My Profile",
    description="The signed-in account merged with its profile details.",
)
async def get_my_profile(user: CurrentUserDep, repos: ReposDep) -> ProfileRead:
    preference = await repos.preferences.get_by_user(user.id)
    return _profile(user, preference)


@router.get(
    "/me/notifications",
    response_model=NotificationSettings,
    summary="Get Notification Settings",
    description="Notification switches; all on until the user changes them.",
)
async def get_notification_settings(user: CurrentUserDep, repos: ReposDep) -> NotificationSettings:
    preference = await repos.preferences.get_by_user(user.id)
    if preference is None:
        return NotificationSettings()
    return NotificationSettings.model_validate(preference)


@router.put(
    "/me/notifications",
    response_model=NotificationSettings,
    summary="Update Notification Settings",
    description="Change any of the notification switches. Omitted switches keep their value.",
)
async def update_notification_settings(
    payload: NotificationSettings, user: CurrentUserDep, repos: ReposDep
) -> NotificationSettings:
    """
    - **emailReminders**, **taskNotifications**, **healthReminders**, **emotionalSupportMessages**: booleans.
    """
    preference = await repos.preferences.update_fields(user.id, payload.model_dump(exclude_unset=True))
    return NotificationSettings.model_validate(preference)


@router.get(
    "/me/privacy",
    response_model=PrivacySettings,
    summary="Get Privacy Settings",
    description="Data sharing switches; all off until the user changes them.",
)
async def get_privacy_settings(user: CurrentUserDep, repos: ReposDep) -> PrivacySettings:
    preference = await repos.preferences.get_by_user(user.id)
    if preference is None:
        return PrivacySettings()
    return PrivacySettings.model_validate(preference)


@router.put(
    "/me/privacy",
    response_model=PrivacySettings,
    summary="Update Privacy Settings",
    description="Change any of the data sharing switches. Omitted switches keep their value.",
)
async def update_privacy_settings(payload: PrivacySettings, user: CurrentUserDep, repos: ReposDep) -> PrivacySettings:
    """
    - **shareHealthData**, **shareEmotionalData**, **allowParentAccess**, **allowSchoolAccess**: booleans.
    """
    preference = await repos.preferences.update_fields(user.id, payload.model_dump(exclude_unset=True))
    return PrivacySettings.model_validate(preference)


@router.get(
    "/me/appearance",
    response_model=AppearanceSettings,
    summary="Get Appearance Settings",
)
async def get_appearance_settings(user: CurrentUserDep, repos: ReposDep) -> AppearanceSettings:
    preference = await repos.preferences.get_by_user(user.id)
    if preference is None:
        return AppearanceSettings()
    return AppearanceSettings.model_validate(preference)


@router.put(
    "/me/appearance",
    response_model=AppearanceSettings,
    summary="Update Appearance Settings",
)
async def update_appearance_settings(
    payload: AppearanceSettings, user: CurrentUserDep, repos: ReposDep
) -> AppearanceSettings:
    preference = await repos.preferences.update_fields(user.id, payload.model_dump(exclude_unset=True))
    return AppearanceSettings.model_validate(preference)


@router.get(
    "/{user_id}",
    response_model=ProfileRead,
    summary="Get User",
    description="Read an account and its profile details. Administrators or the account owner.",
    responses={
        403: {"description": "Caller may not view this account"},
        404: {"description": "Account not found"},
    },
)
async def get_user(user_id: int, _: AdminOrSelfDep, repos: ReposDep) -> ProfileRead:
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    preference = await repos.preferences.get_by_user(user_id)
    return _profile(user, preference)


@router.put(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Update User Profile",
    description="Update the display name, avatar and profile details. Administrators or the account owner.",
    responses={
        403: {"description": "Caller may not change this account"},
        404: {"description": "Account not found"},
    },
)
async def update_user(
    user_id: int, payload: ProfileUpdate, _: AdminOrSelfDep, repos: ReposDep
) -> MessageResponse:
    """
    Update a profile.

    - **full_name**, **avatar**: stored on the account.
    - **phone**, **school**, **grade**, **bio**: stored on the preference row, which is created if missing.
    """
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")

    changes = payload.model_dump(exclude_unset=True)
    account_changes = {key: value for key, value in changes.items() if key in ACCOUNT_FIELDS}
    profile_changes = {key: value for key, value in changes.items() if key in PROFILE_FIELDS}

    if account_changes:
        for key, value in account_changes.items():
            setattr(user, key, value)
        await repos.users.update(user)
    if profile_changes:
        await repos.preferences.update_fields(user_id, profile_changes)

    return MessageResponse(message="Profile updated successfully")


@router.post(
    "/{user_id}/avatar",
    response_model=AvatarUploadResponse,
    summary="Upload Avatar",
    description="Upload an image (max 5MB) as the account avatar. Administrators or the account owner.",
    responses={
        400: {"description": "No file, or not an image"},
        404: {"description": "Account not found"},
        413: {"description": "File too large"},
    },
)
async def upload_avatar(
    user_id: int,
    _: AdminOrSelfDep,
    repos: ReposDep,
    avatar: Optional[UploadFile] = File(default=None),
) -> AvatarUploadResponse:
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    if avatar is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded!")

    avatar_config = settings.avatar
    try:
        file_name = await save_avatar(avatar, avatar_config.upload_dir, avatar_config.max_bytes)
    except AvatarRejectedError as e:
        code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE if e.too_large else status.HTTP_400_BAD_REQUEST
        raise HTTPException(status_code=code, detail=str(e))

    user.avatar = file_name
    await repos.users.update(user)
    return AvatarUploadResponse(message="Avatar uploaded successfully!", avatar=file_name)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete User",
    description="Delete an account and everything it owns. Administrators or the account owner.",
    responses={
        403: {"description": "Caller may not delete this account"},
        404: {"description": "Account not found"},
    },
)
async def delete_user(user_id: int, caller: AdminOrSelfDep, repos: ReposDep) -> MessageResponse:
    if not await repos.users.delete(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    logger.info(f"User {user_id} deleted by user {caller.id}")
    return MessageResponse(message="User was deleted successfully!")
