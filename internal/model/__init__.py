from .base import Base
from .profile import Profile
from .category import Category
from .tag import Tag, PostTag
from .post import Post
from .comment import Comment

__all__ = [
    "Base",
    "Profile",
    "Category",
    "Tag",
    "PostTag",
    "Post",
    "Comment",
]
