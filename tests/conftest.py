"""Shared fixtures: an in-memory blog store behind fake repositories.

The fakes honour the repository contracts (unique slugs, get-or-create,
association replacement, cascade on delete) so the use cases can be
exercised without PostgreSQL.
"""

import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Dict, List, Optional, Set, Tuple
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest

from pkg.auth.auth import ContextAuthProvider
from pkg.auth.type import AuthUser
from internal.post.repository.option import ORDER_BY_CREATED_AT
from internal.post.repository.errors import ErrFailedToGet as ErrFailedToGetPost
from internal.post.usecase.usecase import PostUseCase
from internal.category.repository.errors import ErrFailedToUpsert as ErrFailedToUpsertCategory
from internal.tag.repository.errors import ErrFailedToUpsert as ErrFailedToUpsertTag


BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeStore:
    def __init__(self):
        self.profiles: Dict[str, SimpleNamespace] = {}
        self.categories: Dict[str, SimpleNamespace] = {}
        self.tags: Dict[str, SimpleNamespace] = {}
        self.posts: Dict[uuid.UUID, SimpleNamespace] = {}
        self.post_tags: Set[Tuple[uuid.UUID, uuid.UUID]] = set()
        self.comments: Dict[uuid.UUID, SimpleNamespace] = {}
        self.writes: List[str] = []
        self._tick = 0

    def now(self) -> datetime:
        self._tick += 1
        return BASE_TIME + timedelta(minutes=self._tick)

    def tag_slugs_of(self, post_id: uuid.UUID) -> Set[str]:
        by_id = {t.id: t.slug for t in self.tags.values()}
        return {by_id[tag_id] for pid, tag_id in self.post_tags if pid == post_id}

    def hydrate(self, row: SimpleNamespace, with_tags: bool = True) -> SimpleNamespace:
        author = next(
            (p for p in self.profiles.values() if p.id == row.author_id), None
        )
        category = next(
            (c for c in self.categories.values() if c.id == row.category_id), None
        )
        tags = None
        if with_tags:
            tag_ids = {tag_id for pid, tag_id in self.post_tags if pid == row.id}
            tags = sorted(
                (t for t in self.tags.values() if t.id in tag_ids),
                key=lambda t: t.name,
            )
        return SimpleNamespace(
            **vars(row), author=author, category=category, tags=tags
        )


class FakeProfileRepository:
    def __init__(self, store: FakeStore):
        self.store = store

    async def get_or_create(self, opt):
        profile = self.store.profiles.get(opt.user_id)
        if profile is None:
            self.store.writes.append("profile")
            profile = SimpleNamespace(
                id=uuid.uuid4(),
                user_id=opt.user_id,
                display_name=opt.display_name,
                bio=None,
                avatar_url=None,
                created_at=self.store.now(),
            )
            self.store.profiles[opt.user_id] = profile
        return profile


class FakeCategoryRepository:
    def __init__(self, store: FakeStore):
        self.store = store
        self.fail_slugs: Set[str] = set()

    async def list(self, opt):
        categories = sorted(self.store.categories.values(), key=lambda c: c.name)
        return categories[: opt.limit] if opt.limit > 0 else categories

    async def get_by_slug(self, slug):
        return self.store.categories.get(slug)

    async def get_or_create(self, opt):
        if opt.slug in self.fail_slugs:
            raise ErrFailedToUpsertCategory(f"cannot upsert {opt.slug}")
        category = self.store.categories.get(opt.slug)
        if category is None:
            self.store.writes.append("category")
            category = SimpleNamespace(
                id=uuid.uuid4(),
                name=opt.name,
                slug=opt.slug,
                description=opt.description,
                created_at=self.store.now(),
            )
            self.store.categories[opt.slug] = category
        return category


class FakeTagRepository:
    def __init__(self, store: FakeStore):
        self.store = store
        self.fail_slugs: Set[str] = set()

    async def get_or_create(self, opt):
        if opt.slug in self.fail_slugs:
            raise ErrFailedToUpsertTag(f"cannot upsert {opt.slug}")
        tag = self.store.tags.get(opt.slug)
        if tag is None:
            self.store.writes.append("tag")
            tag = SimpleNamespace(
                id=uuid.uuid4(), name=opt.name, slug=opt.slug, created_at=self.store.now()
            )
            self.store.tags[opt.slug] = tag
        return tag

    async def replace_post_tags(self, opt):
        self.store.writes.append("post_tags")
        self.store.post_tags = {
            (pid, tid) for pid, tid in self.store.post_tags if pid != opt.post_id
        }
        for tag_id in opt.tag_ids:
            self.store.post_tags.add((opt.post_id, tag_id))
        return len(set(opt.tag_ids))


class FakePostRepository:
    def __init__(self, store: FakeStore):
        self.store = store
        self.fail_reads = False

    def _check_reads(self):
        if self.fail_reads:
            raise ErrFailedToGetPost("connection refused")

    async def create(self, opt):
        self.store.writes.append("post")
        now = self.store.now()
        row = SimpleNamespace(id=uuid.uuid4(), created_at=now, updated_at=now, **opt.data)
        self.store.posts[row.id] = row
        return row

    async def update(self, opt):
        row = self.store.posts.get(opt.id)
        if row is None:
            return None
        self.store.writes.append("post")
        for key, value in opt.data.items():
            setattr(row, key, value)
        row.updated_at = self.store.now()
        return row

    async def get_one(self, opt):
        self._check_reads()
        for row in self.store.posts.values():
            if opt.id and row.id != opt.id:
                continue
            if opt.slug and row.slug != opt.slug:
                continue
            if opt.status and row.status != opt.status:
                continue
            return self.store.hydrate(row)
        return None

    async def list(self, opt):
        self._check_reads()
        rows = list(self.store.posts.values())
        if opt.status:
            rows = [r for r in rows if r.status == opt.status]
        if opt.category_slug:
            category = self.store.categories.get(opt.category_slug)
            rows = [r for r in rows if category and r.category_id == category.id]

        if opt.order_by == ORDER_BY_CREATED_AT:
            rows.sort(key=lambda r: r.created_at, reverse=True)
        else:
            rows.sort(key=lambda r: r.published_at or r.created_at, reverse=True)

        if opt.limit > 0:
            rows = rows[: opt.limit]
        return [self.store.hydrate(r, with_tags=opt.with_tags) for r in rows]

    async def delete(self, opt):
        if opt.id not in self.store.posts:
            return False
        self.store.writes.append("delete")
        del self.store.posts[opt.id]
        self.store.post_tags = {
            (pid, tid) for pid, tid in self.store.post_tags if pid != opt.id
        }
        self.store.comments = {
            cid: c for cid, c in self.store.comments.items() if c.post_id != opt.id
        }
        return True


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def auth():
    return ContextAuthProvider()


@pytest.fixture
def author():
    return AuthUser(id="user-1", email="jane.doe@example.com")


@pytest.fixture
def post_repository(store):
    return FakePostRepository(store)


@pytest.fixture
def category_repository(store):
    return FakeCategoryRepository(store)


@pytest.fixture
def tag_repository(store):
    return FakeTagRepository(store)


@pytest.fixture
def post_usecase(store, post_repository, category_repository, tag_repository, auth, mock_logger):
    return PostUseCase(
        repository=post_repository,
        profile_repository=FakeProfileRepository(store),
        category_repository=category_repository,
        tag_repository=tag_repository,
        auth=auth,
        logger=mock_logger,
    )


def make_post_row(
    store: FakeStore,
    title: str,
    status: str = "published",
    published_at: Optional[datetime] = None,
    category: Optional[SimpleNamespace] = None,
    content: str = "",
) -> SimpleNamespace:
    """Insert a post row directly into the store."""
    now = store.now()
    row = SimpleNamespace(
        id=uuid.uuid4(),
        title=title,
        slug=title.lower().replace(" ", "-"),
        excerpt=None,
        content=content,
        featured_image_url=None,
        author_id=None,
        category_id=category.id if category else None,
        status=status,
        scheduled_at=None,
        published_at=published_at,
        created_at=now,
        updated_at=now,
        meta_title=None,
        meta_description=None,
        meta_keywords=[],
    )
    store.posts[row.id] = row
    return row


@pytest.fixture
def make_post(store):
    def _make(title, **kwargs):
        return make_post_row(store, title, **kwargs)

    return _make


@pytest.fixture
def mock_session():
    """AsyncSession stand-in: add() is sync, the rest are awaitable."""
    session = MagicMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def mock_db(mock_session):
    @asynccontextmanager
    async def _get_session():
        yield mock_session

    db = MagicMock()
    db.get_session = _get_session
    return db
