"""Unit tests for the category use case."""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
import uuid

import pytest

from internal.category import CategoryUseCaseConfig, NewCategoryUseCase
from internal.category.repository.errors import ErrFailedToGet
from internal.category.repository.option import ListOptions


def _category(name, slug, description=None):
    return SimpleNamespace(
        id=uuid.uuid4(),
        name=name,
        slug=slug,
        description=description,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def repository():
    return AsyncMock()


@pytest.fixture
def usecase(repository, mock_logger):
    return NewCategoryUseCase(repository=repository, logger=mock_logger)


class TestListCategories:
    """Tests for list_categories."""

    @pytest.mark.asyncio
    async def test_maps_display_defaults(self, usecase, repository):
        repository.list.return_value = [
            _category("Python", "python", "All about Python"),
            _category("Web Dev", "web-dev"),
        ]

        categories = await usecase.list_categories()

        repository.list.assert_awaited_once_with(ListOptions())
        assert [c.slug for c in categories] == ["python", "web-dev"]
        web = categories[1]
        assert web.description == ""
        assert web.posts_count == 0
        assert web.color == "#2563eb"
        assert web.is_active is True
        assert web.updated_at == web.created_at

    @pytest.mark.asyncio
    async def test_custom_color(self, repository, mock_logger):
        usecase = NewCategoryUseCase(
            repository=repository,
            logger=mock_logger,
            config=CategoryUseCaseConfig(default_color="#000000"),
        )
        repository.list.return_value = [_category("Python", "python")]

        [category] = await usecase.list_categories()

        assert category.color == "#000000"

    @pytest.mark.asyncio
    async def test_storage_error_returns_empty(self, usecase, repository, mock_logger):
        repository.list.side_effect = ErrFailedToGet("connection refused")

        assert await usecase.list_categories() == []
        mock_logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_view_serializes(self, usecase, repository):
        repository.list.return_value = [_category("Python", "python")]

        [category] = await usecase.list_categories()
        data = category.to_dict()

        assert data["name"] == "Python"
        assert data["posts_count"] == 0


class TestGetCategoryBySlug:
    """Tests for get_category_by_slug."""

    @pytest.mark.asyncio
    async def test_found(self, usecase, repository):
        category = _category("Python", "python")
        repository.get_by_slug.return_value = category

        assert await usecase.get_category_by_slug("python") is category
        repository.get_by_slug.assert_awaited_once_with("python")

    @pytest.mark.asyncio
    async def test_absent(self, usecase, repository):
        repository.get_by_slug.return_value = None

        assert await usecase.get_category_by_slug("nope") is None

    @pytest.mark.asyncio
    async def test_storage_error_returns_none(self, usecase, repository):
        repository.get_by_slug.side_effect = ErrFailedToGet("timeout")

        assert await usecase.get_category_by_slug("python") is None
