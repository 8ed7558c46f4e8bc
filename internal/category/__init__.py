from .interface import ICategoryUseCase
from .type import CategoryUseCaseConfig, CategoryView
from .usecase.new import New as NewCategoryUseCase
from .repository import ICategoryRepository, New as NewCategoryRepository

__all__ = [
    "ICategoryUseCase",
    "CategoryUseCaseConfig",
    "CategoryView",
    "NewCategoryUseCase",
    "ICategoryRepository",
    "NewCategoryRepository",
]
