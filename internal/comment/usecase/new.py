from pkg.logger.logger import Logger
from ..repository.interface import ICommentRepository
from ..interface import ICommentUseCase
from .usecase import CommentUseCase


def New(repository: ICommentRepository, logger: Logger) -> ICommentUseCase:
    return CommentUseCase(repository=repository, logger=logger)


__all__ = ["New"]
