from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# Response models never expose created_at / updated_at.

T = TypeVar("T")


# --- Pagination ---

class PaginatedResponse(BaseModel, Generic[T]):
    result: list[T]
    total: int


# --- Nested references ---

class BlogRef(BaseModel):
    id: int
    title: str
    model_config = ConfigDict(from_attributes=True)


class TagRef(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)


class CategoryRef(TagRef):
    pass


# --- User ---

class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=150)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=6, max_length=128)


class UserUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=150)
    email: str | None = Field(None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    model_config = ConfigDict(from_attributes=True)


# --- Blog ---

class BlogCreate(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    published: bool = False


class BlogUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    content: str | None = Field(None, min_length=1)
    published: bool | None = None


class BlogResponse(BaseModel):
    id: int
    title: str
    content: str
    published: bool
    author_id: int
    model_config = ConfigDict(from_attributes=True)


# --- Tag / Category ---

class TagCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class TagUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)


class TagResponse(TagRef):
    pass


class CategoryCreate(TagCreate):
    pass


class CategoryUpdate(TagUpdate):
    pass


class CategoryResponse(TagRef):
    pass


# --- Junctions ---

class BlogTagCreate(BaseModel):
    blog_id: int
    tag_id: int


class BlogTagUpdate(BaseModel):
    blog_id: int | None = None
    tag_id: int | None = None


class BlogTagResponse(BaseModel):
    id: int
    blog_id: int
    tag_id: int
    blog: BlogRef | None = None
    tag: TagRef | None = None
    model_config = ConfigDict(from_attributes=True)


class BlogCategoryCreate(BaseModel):
    blog_id: int
    category_id: int


class BlogCategoryUpdate(BaseModel):
    blog_id: int | None = None
    category_id: int | None = None


class BlogCategoryResponse(BaseModel):
    id: int
    blog_id: int
    category_id: int
    blog: BlogRef | None = None
    category: CategoryRef | None = None
    model_config = ConfigDict(from_attributes=True)


# --- Draft ---

class DraftCreate(BaseModel):
    blog_id: int
    content: str = Field(min_length=1)


class DraftUpdate(BaseModel):
    blog_id: int | None = None
    content: str | None = Field(None, min_length=1)


class DraftResponse(BaseModel):
    id: int
    content: str
    blog_id: int
    created_by_id: int
    blog: BlogRef | None = None
    model_config = ConfigDict(from_attributes=True)


# --- Comment ---

class CommentCreate(BaseModel):
    blog_id: int
    content: str = Field(min_length=1)


class CommentUpdate(BaseModel):
    blog_id: int | None = None
    content: str | None = Field(None, min_length=1)


class CommentResponse(BaseModel):
    id: int
    content: str
    blog_id: int
    user_id: int
    blog: BlogRef | None = None
    model_config = ConfigDict(from_attributes=True)


# --- Like ---

class LikeCreate(BaseModel):
    blog_id: int


class LikeUpdate(BaseModel):
    blog_id: int | None = None


class LikeResponse(BaseModel):
    id: int
    blog_id: int
    user_id: int
    blog: BlogRef | None = None
    model_config = ConfigDict(from_attributes=True)
