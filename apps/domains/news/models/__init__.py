from .news import News, NewsLink

__all__ = [
    "News",
    "NewsLink",
]
