"""GitHub account link routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from knot.application.usecase.github import (
    LinkGithubAccountRequest,
    LinkGithubAccountResponse,
    LinkGithubAccountUseCase,
)
from knot.interface.api.dependencies import get_acting_user_id

router = APIRouter(prefix="/users", tags=["github"], route_class=DishkaRoute)


class LinkGithubAccountAPIRequest(BaseModel):
    """API request for linking a GitHub account.

    Produced by the gateway after it completes the GitHub OAuth exchange.
    """

    user_id: UUID
    github_id: int
    github_username: str = Field(min_length=1)
    github_access_token: str = Field(min_length=1)
    avatar_url: str | None = None


@router.post("/me/github", response_model=LinkGithubAccountResponse)
async def link_github_account(
    request: LinkGithubAccountAPIRequest,
    link_github_account_use_case: FromDishka[LinkGithubAccountUseCase],
    acting_user_id: UUID = Depends(get_acting_user_id),
) -> LinkGithubAccountResponse:
    """Link (or relink) the acting user's GitHub account.

    Relinking replaces the GitHub identity on the existing link.

    Errors:
        403 OAUTH.001 if `user_id` is not the acting user.
        409 OAUTH.002 if the GitHub account belongs to another user.
    """
    return await link_github_account_use_case.execute(
        LinkGithubAccountRequest(
            acting_user_id=acting_user_id,
            user_id=request.user_id,
            github_id=request.github_id,
            github_username=request.github_username,
            github_access_token=request.github_access_token,
            avatar_url=request.avatar_url,
        )
    )
