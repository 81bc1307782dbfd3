"""User use cases."""

from .check_user_exists import (
    CheckUserExistsRequest,
    CheckUserExistsResponse,
    CheckUserExistsUseCase,
)
from .create_user import CreateUserRequest, CreateUserUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .search_users import SearchUsersRequest, SearchUsersResponse, SearchUsersUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase
from .user_info import UserInfoResponse

__all__ = [
    "CheckUserExistsRequest",
    "CheckUserExistsResponse",
    "CheckUserExistsUseCase",
    "CreateUserRequest",
    "CreateUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserInfoResponse",
]
