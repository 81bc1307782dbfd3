"""User routes."""

from typing import Annotated
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from email_validator import EmailNotValidError, validate_email
from fastapi import APIRouter, Depends, Query, status
from pydantic import (
    AfterValidator,
    BaseModel,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from knot.application.usecase.user import (
    CheckUserExistsRequest,
    CheckUserExistsResponse,
    CheckUserExistsUseCase,
    CreateUserRequest,
    CreateUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserInfoResponse,
)
from knot.interface.api.dependencies import get_acting_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


def _not_blank(value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


_http_url = TypeAdapter(HttpUrl)


def _valid_email(value: str) -> str:
    """Check the address format but keep it exactly as submitted."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from e
    return value


def _valid_url(value: str) -> str:
    """Check the URL format but keep it exactly as submitted."""
    try:
        _http_url.validate_python(value)
    except ValidationError as e:
        raise ValueError("must be a valid http(s) URL") from e
    return value


Email = Annotated[str, AfterValidator(_valid_email)]
Url = Annotated[str, AfterValidator(_valid_url)]


class CreateUserAPIRequest(BaseModel):
    """API request for registering a user."""

    email: Email
    password: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=50)
    profile_image_url: Url | None = None
    description: str | None = Field(None, max_length=500)
    github_link: Url | None = None

    @field_validator("password", "name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        """bcrypt only hashes the first 72 bytes."""
        if len(v.encode("utf-8")) > 72:
            raise ValueError("must be at most 72 bytes")
        return v


class UpdateUserAPIRequest(BaseModel):
    """API request for updating the current user's profile.

    Omitted (or null) fields are left unchanged.
    """

    name: str | None = Field(None, min_length=1, max_length=50)
    position: str | None = None  # Display label, e.g. "개발자", or "DEVELOPER"
    detailed_position: str | None = Field(None, min_length=1, max_length=30)
    career_level: str | None = None
    profile_image_url: Url | None = None
    description: str | None = Field(None, max_length=500)
    github_link: Url | None = None

    @field_validator("name", "detailed_position")
    @classmethod
    def not_blank(cls, v: str | None) -> str | None:
        return _not_blank(v)


@router.post("", response_model=UserInfoResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserInfoResponse:
    """Register a new user.

    Example:
        POST /users

        Request:
        {"email": "alice@example.com", "password": "correct horse", "name": "Alice"}

    Errors:
        409 USER.002 if the email is already registered.
    """
    return await create_user_use_case.execute(
        CreateUserRequest(
            email=request.email,
            password=request.password,
            name=request.name,
            profile_image_url=request.profile_image_url,
            description=request.description,
            github_link=request.github_link,
        )
    )


@router.get("", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    query: str | None = Query(default=None, description="Name or email substring"),
    skills: list[UUID] = Query(default=[], description="Skill IDs, all required"),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> SearchUsersResponse:
    """Search users by keyword and skills.

    Results are ordered by name, then email, then ID. `total` counts every
    match regardless of the page window.

    Example:
        GET /users?query=kim&skills=<uuid>&skills=<uuid>&limit=20&offset=0
    """
    return await search_users_use_case.execute(
        SearchUsersRequest(query=query, skills=skills, limit=limit, offset=offset)
    )


@router.get("/exists", response_model=CheckUserExistsResponse)
async def email_exists(
    check_user_exists_use_case: FromDishka[CheckUserExistsUseCase],
    email: str = Query(min_length=1),
) -> CheckUserExistsResponse:
    """Check whether an email is already registered."""
    return await check_user_exists_use_case.execute(
        CheckUserExistsRequest(email=email)
    )


@router.get("/me", response_model=UserInfoResponse)
async def get_me(
    get_user_use_case: FromDishka[GetUserUseCase],
    acting_user_id: UUID = Depends(get_acting_user_id),
) -> UserInfoResponse:
    """Get the acting user's information."""
    return await get_user_use_case.execute(GetUserRequest(user_id=acting_user_id))


@router.patch("/me", response_model=UserInfoResponse)
async def update_me(
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    acting_user_id: UUID = Depends(get_acting_user_id),
) -> UserInfoResponse:
    """Partially update the acting user's profile.

    Email and password cannot be changed here.

    Example:
        PATCH /users/me
        X-User-Id: 0192f0c1-7d2e-7a51-9b0e-3c6f1f9e2a10

        Request:
        {"position": "개발자", "career_level": "중급"}

    Errors:
        400 VALIDATION.001 if a position or career level label is unknown.
    """
    return await update_user_use_case.execute(
        UpdateUserRequest(
            user_id=acting_user_id,
            name=request.name,
            position=request.position,
            detailed_position=request.detailed_position,
            career_level=request.career_level,
            profile_image_url=request.profile_image_url,
            description=request.description,
            github_link=request.github_link,
        )
    )


@router.get("/{user_id}", response_model=UserInfoResponse)
async def get_user(
    user_id: UUID,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserInfoResponse:
    """Get a user's public information by ID.

    Errors:
        404 USER.001 if the user does not exist.
    """
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.get("/{user_id}/exists", response_model=CheckUserExistsResponse)
async def user_exists(
    user_id: UUID,
    check_user_exists_use_case: FromDishka[CheckUserExistsUseCase],
) -> CheckUserExistsResponse:
    """Check whether a user ID exists."""
    return await check_user_exists_use_case.execute(
        CheckUserExistsRequest(user_id=user_id)
    )
