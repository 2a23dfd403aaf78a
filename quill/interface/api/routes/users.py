"""User routes: signup, signin and the caller's own profile."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field

from quill.application.usecase.auth import (
    SigninRequest,
    SigninResponse,
    SigninUseCase,
    SignupRequest,
    SignupResponse,
    SignupUseCase,
)
from quill.application.usecase.base import CamelModel
from quill.application.usecase.user import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from quill.domain.error import ConflictError, InvalidCredentialsError, NotFoundError
from quill.domain.value import UserId
from quill.interface.api.auth import require_subject

router = APIRouter(prefix="/user", tags=["users"], route_class=DishkaRoute)

USERNAME_PATTERN = r"^\S+$"


class SignupAPIRequest(CamelModel):
    """API request for creating an account."""

    username: str = Field(min_length=3, max_length=30, pattern=USERNAME_PATTERN)
    password: str = Field(min_length=6, max_length=72)
    name: str | None = Field(default=None, max_length=100)


class SigninAPIRequest(CamelModel):
    """API request for signing in."""

    username: str = Field(min_length=3, max_length=30, pattern=USERNAME_PATTERN)
    password: str = Field(min_length=6, max_length=72)


class UpdateProfileAPIRequest(CamelModel):
    """API request for updating the caller's profile."""

    name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = None
    password: str | None = Field(default=None, min_length=6, max_length=72)


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def _server_error(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
    )


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupAPIRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> SignupResponse:
    """Create an account and return a credential token.

    Example:
        POST /user/signup
        {"username": "ada", "password": "hunter22", "name": "Ada"}

        Response (201):
        {"token": "eyJhbGciOi...", "userId": 1}

    Raises:
        HTTPException: 409 if the username is taken, 400 if the input is invalid
    """
    try:
        return await signup_use_case.execute(
            SignupRequest(
                username=request.username,
                password=request.password,
                name=request.name,
            )
        )
    except ConflictError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already exists",
        )
    except ValueError as e:
        logfire.warn("Signup validation error", error=str(e))
        raise _bad_request(str(e))
    except Exception as e:
        logfire.error("Unexpected error during signup", error=str(e))
        raise _server_error("Failed to create account")


@router.post("/signin", response_model=SigninResponse)
async def signin(
    request: SigninAPIRequest,
    signin_use_case: FromDishka[SigninUseCase],
) -> SigninResponse:
    """Exchange a username and password for a credential token.

    Raises:
        HTTPException: 401 if the credentials don't match
    """
    try:
        return await signin_use_case.execute(
            SigninRequest(username=request.username, password=request.password)
        )
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    except Exception as e:
        logfire.error("Unexpected error during signin", error=str(e))
        raise _server_error("Failed to sign in")


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    subject_id: UserId = Depends(require_subject),
) -> ProfileResponse:
    """Get the caller's own profile.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the account is gone
    """
    try:
        return await get_profile_use_case.execute(GetProfileRequest(user_id=subject_id))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except Exception as e:
        logfire.error("Unexpected error fetching profile", error=str(e))
        raise _server_error("Error fetching user profile")


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    subject_id: UserId = Depends(require_subject),
) -> ProfileResponse:
    """Update the caller's own profile.

    Only the fields present in the body change. The target is always the
    authenticated subject, so no ownership check is needed.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the account is gone
    """
    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=subject_id,
                name=request.name,
                bio=request.bio,
                avatar_url=request.avatar_url,
                password=request.password,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except ValueError as e:
        logfire.warn("Profile update validation error", error=str(e))
        raise _bad_request(str(e))
    except Exception as e:
        logfire.error("Unexpected error updating profile", error=str(e))
        raise _server_error("Error updating user profile")
