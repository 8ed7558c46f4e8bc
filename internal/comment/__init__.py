from .interface import ICommentUseCase
from .type import CreateCommentInput
from .errors import ErrCommentNotFound, ErrInvalidInput
from .usecase.new import New as NewCommentUseCase
from .repository import ICommentRepository, New as NewCommentRepository

__all__ = [
    "ICommentUseCase",
    "CreateCommentInput",
    "ErrCommentNotFound",
    "ErrInvalidInput",
    "NewCommentUseCase",
    "ICommentRepository",
    "NewCommentRepository",
]
