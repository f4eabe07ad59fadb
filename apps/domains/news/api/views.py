from apps.domains.linking.views import LinkedResourceViewSet
from apps.domains.news.api.serializers import NewsSerializer, NewsWriteSerializer
from apps.domains.news.services import NewsService


class NewsViewSet(LinkedResourceViewSet):
    """
    News CRUD + 링크.
    조회(list/retrieve/for)는 공개, 생성은 aslab, 수정/삭제/링크는 작성자 또는 aslab.
    """
    service_class = NewsService
    serializer_class = NewsSerializer
    write_serializer_class = NewsWriteSerializer
    public_read_actions = ("list", "retrieve", "for_entity")
