from .type import Dependencies, ContentServices
from .new import init_dependencies, close_dependencies, New as NewContentServices

__all__ = [
    "Dependencies",
    "ContentServices",
    "init_dependencies",
    "close_dependencies",
    "NewContentServices",
]
