"""Initial schema: users, blogs, tags, categories, junctions, drafts, comments, likes

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _fk(name: str, target: str) -> sa.Column:
    return sa.Column(name, sa.Integer(), sa.ForeignKey(target, ondelete="CASCADE"), nullable=False)


def _indexes(table: str, *columns: str) -> None:
    for column in columns:
        op.create_index(f"ix_{table}_{column}", table, [column])


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    _indexes("users", "name", "created_at")

    for table in ("tags", "categories"):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("name", sa.String(length=100), nullable=False),
            *_timestamps(),
        )
        _indexes(table, "name", "created_at")

    op.create_table(
        "blogs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("published", sa.Boolean(), nullable=False),
        _fk("author_id", "users.id"),
        *_timestamps(),
    )
    _indexes("blogs", "title", "author_id", "created_at")
    op.create_index("ix_blogs_author_id_created_at", "blogs", ["author_id", "created_at"])

    op.create_table(
        "blog_tags",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("blog_id", "blogs.id"),
        _fk("tag_id", "tags.id"),
        *_timestamps(),
    )
    _indexes("blog_tags", "blog_id", "tag_id", "created_at")

    op.create_table(
        "blog_categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("blog_id", "blogs.id"),
        _fk("category_id", "categories.id"),
        *_timestamps(),
    )
    _indexes("blog_categories", "blog_id", "category_id", "created_at")

    op.create_table(
        "drafts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("content", sa.Text(), nullable=False),
        _fk("blog_id", "blogs.id"),
        _fk("created_by_id", "users.id"),
        *_timestamps(),
    )
    _indexes("drafts", "blog_id", "created_by_id", "created_at")

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("content", sa.Text(), nullable=False),
        _fk("blog_id", "blogs.id"),
        _fk("user_id", "users.id"),
        *_timestamps(),
    )
    _indexes("comments", "blog_id", "user_id", "created_at")

    op.create_table(
        "likes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("blog_id", "blogs.id"),
        _fk("user_id", "users.id"),
        *_timestamps(),
    )
    _indexes("likes", "blog_id", "user_id", "created_at")


def downgrade() -> None:
    for table in (
        "likes",
        "comments",
        "drafts",
        "blog_categories",
        "blog_tags",
        "blogs",
        "categories",
        "tags",
        "users",
    ):
        op.drop_table(table)
