from .interface import IPostUseCase
from .type import (
    PostUseCaseConfig,
    CreatePostInput,
    UpdatePostInput,
    PostView,
    AdminPostView,
    AdminPostSummary,
)
from .errors import ErrPostNotFound, ErrInvalidInput, ErrNotAuthenticated
from .usecase.new import New as NewPostUseCase
from .repository import IPostRepository, New as NewPostRepository

__all__ = [
    "IPostUseCase",
    "PostUseCaseConfig",
    "CreatePostInput",
    "UpdatePostInput",
    "PostView",
    "AdminPostView",
    "AdminPostSummary",
    "ErrPostNotFound",
    "ErrInvalidInput",
    "ErrNotAuthenticated",
    "NewPostUseCase",
    "IPostRepository",
    "NewPostRepository",
]
