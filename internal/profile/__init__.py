from .repository import IProfileRepository, New as NewProfileRepository

__all__ = ["IProfileRepository", "NewProfileRepository"]
