from .news_service import NewsService

__all__ = ["NewsService"]
