"""User use cases."""

from .create_current_user import CreateCurrentUserUseCase
from .get_current_user import GetCurrentUserUseCase
from .update_current_user import UpdateCurrentUserUseCase

__all__ = [
    "CreateCurrentUserUseCase",
    "GetCurrentUserUseCase",
    "UpdateCurrentUserUseCase",
]
