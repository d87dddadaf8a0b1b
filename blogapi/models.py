from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogapi.database import Base


class TimestampMixin:
    """
    ``created_at`` / ``updated_at`` maintained by the database.

    ``eager_defaults`` fetches the server-generated values right after the
    INSERT/UPDATE so they never trigger a lazy load on an AsyncSession.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __mapper_args__ = {"eager_defaults": True}


def _fk(target: str) -> Mapped[int]:
    return mapped_column(
        Integer, ForeignKey(target, ondelete="CASCADE"), nullable=False, index=True
    )


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------
class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)


# ---------------------------------------------------------------------------
# Tag / Category (global, unowned)
# ---------------------------------------------------------------------------
class Tag(TimestampMixin, Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)


class Category(TimestampMixin, Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)


# ---------------------------------------------------------------------------
# Blog
# ---------------------------------------------------------------------------
class Blog(TimestampMixin, Base):
    __tablename__ = "blogs"

    __table_args__ = (
        # Author's blogs, newest first
        Index("ix_blogs_author_id_created_at", "author_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    author_id: Mapped[int] = _fk("users.id")

    # lazy="noload": repositories load relations explicitly
    author: Mapped[Optional[User]] = relationship("User", lazy="noload")


# ---------------------------------------------------------------------------
# Junctions: rows disappear with either parent via ON DELETE CASCADE
# ---------------------------------------------------------------------------
class BlogTag(TimestampMixin, Base):
    __tablename__ = "blog_tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    blog_id: Mapped[int] = _fk("blogs.id")
    tag_id: Mapped[int] = _fk("tags.id")

    blog: Mapped[Optional[Blog]] = relationship("Blog", lazy="noload")
    tag: Mapped[Optional[Tag]] = relationship("Tag", lazy="noload")


class BlogCategory(TimestampMixin, Base):
    __tablename__ = "blog_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    blog_id: Mapped[int] = _fk("blogs.id")
    category_id: Mapped[int] = _fk("categories.id")

    blog: Mapped[Optional[Blog]] = relationship("Blog", lazy="noload")
    category: Mapped[Optional[Category]] = relationship("Category", lazy="noload")


# ---------------------------------------------------------------------------
# Owned children of Blog
# ---------------------------------------------------------------------------
class Draft(TimestampMixin, Base):
    __tablename__ = "drafts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    blog_id: Mapped[int] = _fk("blogs.id")
    created_by_id: Mapped[int] = _fk("users.id")

    blog: Mapped[Optional[Blog]] = relationship("Blog", lazy="noload")
    created_by: Mapped[Optional[User]] = relationship("User", lazy="noload")


class Comment(TimestampMixin, Base):
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    blog_id: Mapped[int] = _fk("blogs.id")
    user_id: Mapped[int] = _fk("users.id")

    blog: Mapped[Optional[Blog]] = relationship("Blog", lazy="noload")
    user: Mapped[Optional[User]] = relationship("User", lazy="noload")


class Like(TimestampMixin, Base):
    __tablename__ = "likes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    blog_id: Mapped[int] = _fk("blogs.id")
    user_id: Mapped[int] = _fk("users.id")

    blog: Mapped[Optional[Blog]] = relationship("Blog", lazy="noload")
    user: Mapped[Optional[User]] = relationship("User", lazy="noload")
