from .repository import ITagRepository, New as NewTagRepository

__all__ = ["ITagRepository", "NewTagRepository"]
