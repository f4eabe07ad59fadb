from django.db.models import Count

from apps.domains.linking.services import LinkedResourceService
from apps.domains.social.models import Post, PostLink


class PostService(LinkedResourceService):
    """Post + PostLink. 작성은 로그인 사용자 누구나, 수정/삭제/링크는 작성자 또는 aslab."""
    model = Post
    link_model = PostLink
    owner_field = "user"
    create_requires_privileged = False
    upload_folder = "posts"
    label = "Post"

    def list_queryset(self):
        return super().list_queryset().annotate(comment_count=Count("comments"))
