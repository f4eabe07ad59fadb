from .post_service import PostService
from .comment_service import add_comment, delete_comment, get_comments_for_post

__all__ = [
    "PostService",
    "add_comment",
    "delete_comment",
    "get_comments_for_post",
]
