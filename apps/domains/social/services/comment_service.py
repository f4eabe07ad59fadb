import logging

from rest_framework.exceptions import NotFound, PermissionDenied

from apps.core.permissions import can_mutate
from apps.domains.social.models import Comment, Post

logger = logging.getLogger(__name__)


def get_comments_for_post(post_id: int):
    return (
        Comment.objects.filter(post_id=post_id)
        .select_related("user")
        .order_by("created_at", "id")
    )


def add_comment(actor, post_id: int, content: str) -> Comment:
    if not Post.objects.filter(pk=post_id).exists():
        raise NotFound("Post not found")
    comment = Comment.objects.create(post_id=post_id, user=actor, content=content)
    logger.info("comment created: id=%s post=%s actor=%s", comment.pk, post_id, actor.pk)
    return comment


def delete_comment(actor, comment_id: int) -> None:
    """작성자 또는 aslab만 삭제."""
    comment = Comment.objects.filter(pk=comment_id).first()
    if comment is None:
        raise NotFound("Comment not found")
    if not can_mutate(actor, comment, "user"):
        raise PermissionDenied("Not authorized to delete this comment")
    comment.delete()
    logger.info("comment deleted: id=%s actor=%s", comment_id, actor.pk)
