from apps.domains.linking.services import LinkedResourceService
from apps.domains.news.models import News, NewsLink


class NewsService(LinkedResourceService):
    """News + NewsLink. 생성은 aslab 전용, 수정/삭제/링크는 작성자 또는 aslab."""
    model = News
    link_model = NewsLink
    owner_field = "created_by"
    create_requires_privileged = True
    upload_folder = "news"
    label = "News"
