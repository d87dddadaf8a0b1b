from blogapi.repositories.base import Searchable, SearchRepository
from blogapi.repositories.resources import (
    BlogCategoryRepository,
    BlogRepository,
    BlogTagRepository,
    CategoryRepository,
    CommentRepository,
    DraftRepository,
    LikeRepository,
    TagRepository,
    UserRepository,
)

__all__ = [
    "Searchable",
    "SearchRepository",
    "BlogCategoryRepository",
    "BlogRepository",
    "BlogTagRepository",
    "CategoryRepository",
    "CommentRepository",
    "DraftRepository",
    "LikeRepository",
    "TagRepository",
    "UserRepository",
]
