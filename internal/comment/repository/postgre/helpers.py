from typing import Any, Dict, Mapping, Union

from internal.model.constant import COMMENT_STATUS_PENDING
from internal.comment.type import CreateCommentInput
from utils.uuid_utils import parse_uuid

_REQUIRED_FIELDS = ("post_id", "author_name", "author_email", "content")


def transform_to_comment(
    data: Union[CreateCommentInput, Mapping[str, Any]],
) -> Dict[str, Any]:
    """Build a comments row from caller input.

    Whatever status the caller sent is dropped: new comments always enter
    the moderation queue.
    """
    if hasattr(data, "to_dict"):
        data = data.to_dict()

    if not isinstance(data, Mapping):
        raise ValueError("Data must be a mapping or have to_dict() method")

    missing = [f for f in _REQUIRED_FIELDS if not data.get(f)]
    if missing:
        raise ValueError(f"missing required comment fields: {', '.join(missing)}")

    post_id = parse_uuid(data["post_id"])
    if post_id is None:
        raise ValueError(f"invalid post_id: {data['post_id']}")

    return {
        "post_id": post_id,
        "author_name": str(data["author_name"]).strip(),
        "author_email": str(data["author_email"]).strip(),
        "content": data["content"],
        "status": COMMENT_STATUS_PENDING,
    }


__all__ = ["transform_to_comment"]
