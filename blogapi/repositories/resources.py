from blogapi.models import Blog, BlogCategory, BlogTag, Category, Comment, Draft, Like, Tag, User
from blogapi.repositories.base import SearchRepository


class UserRepository(SearchRepository[User]):
    model = User
    search_fields = ("name", "email")
    # Reads are global; mutations pass the caller's id to match their own row.
    owner_field = "id"
    hidden_fields = frozenset({"password_hash"})


class BlogRepository(SearchRepository[Blog]):
    model = Blog
    search_fields = ("title", "content", "published")
    owner_field = "author_id"


class TagRepository(SearchRepository[Tag]):
    model = Tag
    search_fields = ("name",)


class CategoryRepository(SearchRepository[Category]):
    model = Category
    search_fields = ("name",)


class BlogTagRepository(SearchRepository[BlogTag]):
    model = BlogTag
    relations = ("blog", "tag")
    joined_search = {"blog": ("title",), "tag": ("name",)}


class BlogCategoryRepository(SearchRepository[BlogCategory]):
    model = BlogCategory
    relations = ("blog", "category")
    joined_search = {"blog": ("title",), "category": ("name",)}


class DraftRepository(SearchRepository[Draft]):
    model = Draft
    search_fields = ("content",)
    owner_field = "created_by_id"
    relations = ("blog",)
    joined_search = {"blog": ("title",)}


class CommentRepository(SearchRepository[Comment]):
    model = Comment
    search_fields = ("content",)
    owner_field = "user_id"
    relations = ("blog",)
    joined_search = {"blog": ("title",)}


class LikeRepository(SearchRepository[Like]):
    model = Like
    owner_field = "user_id"
    relations = ("blog",)
    joined_search = {"blog": ("title",)}
