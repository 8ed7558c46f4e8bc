from internal.model import Category
from ..type import CategoryView


def to_category_view(category: Category, color: str) -> CategoryView:
    return CategoryView(
        id=str(category.id),
        name=category.name,
        slug=category.slug,
        description=category.description or "",
        color=color,
        created_at=category.created_at,
        updated_at=category.created_at,
    )


__all__ = ["to_category_view"]
