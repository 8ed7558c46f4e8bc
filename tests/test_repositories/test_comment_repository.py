"""Unit tests for CommentPostgresRepository."""

from types import SimpleNamespace
from unittest.mock import MagicMock
import uuid

import pytest
from sqlalchemy.exc import SQLAlchemyError

from internal.comment.repository.errors import ErrFailedToCreate, ErrFailedToUpdate
from internal.comment.repository.option import CreateOptions, UpdateStatusOptions
from internal.comment.repository.postgre.comment import CommentPostgresRepository
from internal.comment.repository.postgre.helpers import transform_to_comment
from internal.comment.type import CreateCommentInput


POST_ID = "fc5d5ffb-36cc-4c8d-a288-f5215af7fb80"


def _payload(**overrides):
    data = {
        "post_id": POST_ID,
        "author_name": "  Ann  ",
        "author_email": "ann@example.com",
        "content": "Great read!",
    }
    data.update(overrides)
    return data


class TestTransformToComment:
    """Tests for transform_to_comment helper."""

    def test_forces_pending_status(self):
        row = transform_to_comment(_payload(status="approved"))

        assert row["status"] == "pending"
        assert row["post_id"] == uuid.UUID(POST_ID)
        assert row["author_name"] == "Ann"

    def test_accepts_dataclass_input(self):
        row = transform_to_comment(
            CreateCommentInput(
                post_id=POST_ID,
                author_name="Ann",
                author_email="ann@example.com",
                content="Hi",
            )
        )

        assert row["content"] == "Hi"

    def test_requires_fields(self):
        with pytest.raises(ValueError, match="author_email"):
            transform_to_comment(_payload(author_email=""))

    def test_rejects_malformed_post_id(self):
        with pytest.raises(ValueError, match="post_id"):
            transform_to_comment(_payload(post_id="123"))

    def test_rejects_non_mapping(self):
        with pytest.raises(ValueError):
            transform_to_comment(["not", "a", "mapping"])


class TestCommentRepositoryCreate:
    """Tests for CommentPostgresRepository.create."""

    @pytest.mark.asyncio
    async def test_create_stores_pending_comment(self, mock_db, mock_session, mock_logger):
        repo = CommentPostgresRepository(mock_db, mock_logger)

        record = await repo.create(CreateOptions(data=_payload(status="approved")))

        mock_session.add.assert_called_once_with(record)
        mock_session.commit.assert_awaited_once()
        mock_session.refresh.assert_awaited_once_with(record)
        assert record.status == "pending"
        assert record.author_name == "Ann"

    @pytest.mark.asyncio
    async def test_create_validation_runs_before_session(
        self, mock_db, mock_session, mock_logger
    ):
        repo = CommentPostgresRepository(mock_db, mock_logger)

        with pytest.raises(ValueError):
            await repo.create(CreateOptions(data={"post_id": POST_ID}))

        mock_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_database_error(self, mock_db, mock_session, mock_logger):
        mock_session.commit.side_effect = SQLAlchemyError("Database connection lost")
        repo = CommentPostgresRepository(mock_db, mock_logger)

        with pytest.raises(ErrFailedToCreate):
            await repo.create(CreateOptions(data=_payload()))

        mock_logger.error.assert_called_once()


class TestCommentRepositoryUpdateStatus:
    """Tests for CommentPostgresRepository.update_status."""

    @pytest.mark.asyncio
    async def test_returns_updated_row(self, mock_db, mock_session, mock_logger):
        updated = SimpleNamespace(status="approved")
        result = MagicMock()
        result.scalar_one_or_none.return_value = updated
        mock_session.execute.return_value = result
        repo = CommentPostgresRepository(mock_db, mock_logger)

        record = await repo.update_status(
            UpdateStatusOptions(id=uuid.uuid4(), status="approved")
        )

        assert record is updated
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_database_error(self, mock_db, mock_session, mock_logger):
        mock_session.execute.side_effect = OSError("connection reset")
        repo = CommentPostgresRepository(mock_db, mock_logger)

        with pytest.raises(ErrFailedToUpdate):
            await repo.update_status(UpdateStatusOptions(id=uuid.uuid4(), status="approved"))
