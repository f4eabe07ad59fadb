"""owner 레코드 공통 ViewSet. 라우팅/직렬화만, 규칙은 LinkedResourceService."""
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response


class LinkedResourceViewSet(viewsets.ViewSet):
    service_class = None
    serializer_class = None
    write_serializer_class = None
    public_read_actions = ()
    lookup_value_regex = r"[0-9]+"

    def get_permissions(self):
        if self.action in self.public_read_actions:
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_service(self):
        return self.service_class()

    def get_serializer(self, *args, **kwargs):
        kwargs.setdefault("context", {"request": self.request, "view": self})
        return self.serializer_class(*args, **kwargs)

    def _validated_write(self, request):
        serializer = self.write_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        fields = dict(serializer.validated_data)
        target = fields.pop("target", None)
        image = fields.pop("image", None)
        return fields, target, image

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def list(self, request):
        records = self.get_service().list_all()
        return Response(self.get_serializer(records, many=True).data)

    def retrieve(self, request, pk=None):
        record = self.get_service().get(int(pk))
        return Response(self.get_serializer(record).data)

    def create(self, request):
        service = self.get_service()
        service.ensure_can_create(request.user)
        fields, target, image = self._validated_write(request)
        record = service.create(request.user, fields, target=target, image=image)
        return Response(self.get_serializer(record).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        fields, target, image = self._validated_write(request)
        record = self.get_service().update(request.user, int(pk), fields, target=target, image=image)
        return Response(self.get_serializer(record).data)

    def destroy(self, request, pk=None):
        service = self.get_service()
        service.remove(request.user, int(pk))
        return Response({"message": f"{service.label} deleted successfully"})

    # ------------------------------------------------------------------
    # links
    # ------------------------------------------------------------------

    @action(detail=False, methods=["get"], url_path=r"for/(?P<kind>[^/.]+)/(?P<entity_id>[0-9]+)")
    def for_entity(self, request, kind=None, entity_id=None):
        """GET /<prefix>/for/<type>/<id>/: 해당 엔티티에 링크된 목록 (최신순)."""
        records = self.get_service().list_by_entity(kind, int(entity_id))
        return Response(self.get_serializer(records, many=True).data)

    @action(detail=True, methods=["post"], url_path=r"link/(?P<kind>[^/.]+)/(?P<entity_id>[0-9]+)")
    def link(self, request, pk=None, kind=None, entity_id=None):
        ref = self.get_service().link(request.user, int(pk), kind, int(entity_id))
        return Response({
            "message": "Entity linked successfully",
            "linked_type": ref.kind,
            "linked_id": ref.entity_id,
        })

    @action(detail=True, methods=["delete"])
    def unlink(self, request, pk=None):
        self.get_service().unlink(request.user, int(pk))
        return Response({"message": "Entity link removed successfully"})
