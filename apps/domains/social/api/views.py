from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.domains.linking.views import LinkedResourceViewSet
from apps.domains.social.api.serializers import (
    CommentSerializer,
    PostDetailSerializer,
    PostSerializer,
    PostWriteSerializer,
)
from apps.domains.social.services import (
    PostService,
    add_comment,
    delete_comment,
    get_comments_for_post,
)


class PostViewSet(LinkedResourceViewSet):
    """Post CRUD + 링크 + 댓글. 전부 로그인 필요 (for/ 조회만 공개)."""
    service_class = PostService
    serializer_class = PostSerializer
    write_serializer_class = PostWriteSerializer
    public_read_actions = ("for_entity",)

    def retrieve(self, request, pk=None):
        post = self.get_service().get(int(pk))
        post.comments_list = list(get_comments_for_post(post.pk))
        data = PostDetailSerializer(post, context={"request": request}).data
        return Response(data)

    @action(detail=True, methods=["post"], url_path="comments")
    def comments(self, request, pk=None):
        """POST /social/posts/:id/comments/: 댓글 등록."""
        serializer = CommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = add_comment(request.user, int(pk), serializer.validated_data["content"])
        return Response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)


class CommentViewSet(viewsets.ViewSet):
    """DELETE /social/comments/:id/: 작성자 또는 aslab."""
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r"[0-9]+"

    def destroy(self, request, pk=None):
        delete_comment(request.user, int(pk))
        return Response({"message": "Comment deleted successfully"})
