from .post import Post, PostLink
from .comment import Comment

__all__ = [
    "Post",
    "PostLink",
    "Comment",
]
