"""
Query construction in ``SearchRepository``: scoping, keyword grouping,
ordering and projection rules.
"""
import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.models import Blog, BlogTag, Comment, Draft, Tag, User
from blogapi.repositories import (
    BlogRepository,
    BlogTagRepository,
    CommentRepository,
    DraftRepository,
    Searchable,
    SearchRepository,
    TagRepository,
    UserRepository,
)
from blogapi.schemas import BlogUpdate
from blogapi.services.blog_service import BlogService


async def _seed(db: AsyncSession, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    blogs = [
        Blog(title="Golang Basics", content="c", author_id=alice.id),
        Blog(title="Algorithms in Go", content="Go deeper", author_id=alice.id),
        Blog(title="Golf Swing", content="c", author_id=bob.id),
    ]
    db.add_all(blogs)
    await db.flush()
    return alice, bob, blogs


@pytest.mark.asyncio
async def test_prefix_match_on_any_field(db_session: AsyncSession, make_user):
    alice, _, blogs = await _seed(db_session, make_user)
    rows, total = await BlogRepository(db_session).find_page(keyword="Go", owner_id=alice.id)
    # title prefix on the first, content prefix on the second
    assert total == 2
    assert {b.id for b in rows} == {blogs[0].id, blogs[1].id}


@pytest.mark.asyncio
async def test_owner_scope_wraps_keyword_group(db_session: AsyncSession, make_user):
    alice, bob, blogs = await _seed(db_session, make_user)
    rows, total = await BlogRepository(db_session).find_page(keyword="Gol", owner_id=bob.id)
    assert total == 1
    assert rows[0].id == blogs[2].id


@pytest.mark.asyncio
async def test_unscoped_call_on_owned_repository_sees_all(db_session: AsyncSession, make_user):
    await _seed(db_session, make_user)
    _, total = await BlogRepository(db_session).find_page()
    assert total == 3


@pytest.mark.asyncio
async def test_owner_id_on_global_repository_is_an_error(db_session: AsyncSession):
    with pytest.raises(ValueError):
        await TagRepository(db_session).find_page(owner_id=1)


@pytest.mark.asyncio
async def test_total_is_independent_of_window(db_session: AsyncSession, make_user):
    alice, _, _ = await _seed(db_session, make_user)
    rows, total = await BlogRepository(db_session).find_page(skip=1, take=1, owner_id=alice.id)
    assert len(rows) == 1
    assert total == 2


@pytest.mark.asyncio
async def test_skip_past_the_end(db_session: AsyncSession, make_user):
    alice, _, _ = await _seed(db_session, make_user)
    rows, total = await BlogRepository(db_session).find_page(skip=50, take=10, owner_id=alice.id)
    assert rows == []
    assert total == 2


@pytest.mark.asyncio
async def test_newest_first_with_id_tie_break(db_session: AsyncSession, make_user):
    alice, _, blogs = await _seed(db_session, make_user)
    rows, _ = await BlogRepository(db_session).find_page(owner_id=alice.id)
    assert [b.id for b in rows] == [blogs[1].id, blogs[0].id]


@pytest.mark.asyncio
async def test_parent_scope_wraps_joined_keyword(db_session: AsyncSession, make_user):
    alice, bob, blogs = await _seed(db_session, make_user)
    go, golf = Tag(name="go"), Tag(name="golf")
    db_session.add_all([go, golf])
    await db_session.flush()
    db_session.add_all([
        BlogTag(blog_id=blogs[0].id, tag_id=go.id),
        BlogTag(blog_id=blogs[2].id, tag_id=golf.id),
    ])
    await db_session.flush()

    repo = BlogTagRepository(db_session)
    rows, total = await repo.find_page(
        keyword="go", parent=("blog_id", blogs[0].id), joins=("tag",)
    )
    assert total == 1
    assert rows[0].tag.name == "go"
    assert rows[0].blog_id == blogs[0].id


@pytest.mark.asyncio
async def test_joined_keyword_stays_inside_owner_scope(db_session: AsyncSession, make_user):
    alice, bob, blogs = await _seed(db_session, make_user)
    db_session.add_all([
        Draft(blog_id=blogs[0].id, created_by_id=alice.id, content="x"),
        Draft(blog_id=blogs[0].id, created_by_id=bob.id, content="y"),
    ])
    await db_session.flush()

    rows, total = await DraftRepository(db_session).find_page(keyword="Golang", owner_id=bob.id)
    assert total == 1
    assert rows[0].created_by_id == bob.id
    assert rows[0].blog.title == "Golang Basics"


@pytest.mark.asyncio
async def test_find_by_id_scoped(db_session: AsyncSession, make_user):
    alice, bob, blogs = await _seed(db_session, make_user)
    comment = Comment(blog_id=blogs[0].id, user_id=alice.id, content="hi")
    db_session.add(comment)
    await db_session.flush()

    repo = CommentRepository(db_session)
    assert await repo.find_by_id(comment.id, owner_id=bob.id) is None
    found = await repo.find_by_id(comment.id, owner_id=alice.id)
    assert found is not None
    assert found.blog.title == "Golang Basics"


@pytest.mark.asyncio
async def test_dropdown_projection(db_session: AsyncSession, make_user):
    alice, _, _ = await _seed(db_session, make_user)
    repo = BlogRepository(db_session)

    rows = await repo.dropdown(["title", "title"], owner_id=alice.id)
    assert rows == [{"title": "Algorithms in Go"}, {"title": "Golang Basics"}]

    rows = await repo.dropdown(["id", "title"], keyword="Alg", owner_id=alice.id)
    assert [r["title"] for r in rows] == ["Algorithms in Go"]


@pytest.mark.asyncio
async def test_dropdown_limit(db_session: AsyncSession):
    db_session.add_all([Tag(name=f"t{i}") for i in range(9)])
    await db_session.flush()
    repo = TagRepository(db_session)
    assert len(await repo.dropdown(["id"])) == 5
    assert len(await repo.dropdown(["id"], limit=2)) == 2


@pytest.mark.asyncio
async def test_dropdown_rejects_hidden_and_unknown(db_session: AsyncSession):
    repo = UserRepository(db_session)
    with pytest.raises(ValueError):
        await repo.dropdown(["password_hash"])
    with pytest.raises(ValueError):
        await repo.dropdown(["__class__"])
    with pytest.raises(ValueError):
        await repo.dropdown([])


@pytest.mark.asyncio
async def test_user_search_finds_by_name_or_email(db_session: AsyncSession, make_user):
    await make_user("zoe")
    rows, total = await UserRepository(db_session).find_page(keyword="zoe@")
    assert total == 1
    assert isinstance(rows[0], User)


def test_repositories_satisfy_searchable():
    def accepts(repo: Searchable) -> Searchable:
        return repo

    for repo_class in (BlogRepository, TagRepository, DraftRepository):
        assert callable(accepts(repo_class(None)).find_by_id)


# ---------------------------------------------------------------------------
# Row lock on the update path
# ---------------------------------------------------------------------------

def _capture_statements(monkeypatch, session: AsyncSession) -> list:
    statements = []
    scalar = session.scalar

    async def spy(stmt, *args, **kwargs):
        statements.append(stmt)
        return await scalar(stmt, *args, **kwargs)

    monkeypatch.setattr(session, "scalar", spy)
    return statements


def _postgres_sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


@pytest.mark.asyncio
async def test_locked_lookup_is_select_for_update(db_session: AsyncSession, make_user, monkeypatch):
    alice, _, blogs = await _seed(db_session, make_user)
    statements = _capture_statements(monkeypatch, db_session)

    found = await BlogRepository(db_session).find_by_id(blogs[0].id, alice.id, lock=True)
    assert found.id == blogs[0].id

    sql = _postgres_sql(statements[-1])
    assert sql.endswith("FOR UPDATE")
    assert "blogs.author_id = " in sql.split("WHERE", 1)[1]


@pytest.mark.asyncio
async def test_plain_lookup_takes_no_lock(db_session: AsyncSession, make_user, monkeypatch):
    alice, _, blogs = await _seed(db_session, make_user)
    statements = _capture_statements(monkeypatch, db_session)

    await BlogRepository(db_session).find_by_id(blogs[0].id, alice.id)
    assert "FOR UPDATE" not in _postgres_sql(statements[-1])


@pytest.mark.asyncio
async def test_service_update_locks_the_row(db_session: AsyncSession, make_user, monkeypatch):
    alice, _, blogs = await _seed(db_session, make_user)
    statements = _capture_statements(monkeypatch, db_session)

    await BlogService(db_session).update(blogs[0].id, BlogUpdate(title="Locked"), owner_id=alice.id)

    locked = [s for s in statements if _postgres_sql(s).endswith("FOR UPDATE")]
    assert len(locked) == 1
    assert "blogs.author_id = " in _postgres_sql(locked[0])


def test_joined_search_default_is_read_only():
    with pytest.raises(TypeError):
        SearchRepository.joined_search["blog"] = ("title",)
