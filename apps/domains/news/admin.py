from django.contrib import admin
from .models import News, NewsLink


class NewsLinkInline(admin.TabularInline):
    """링크는 API(존재 검증)로만 변경. admin에서는 조회만."""
    model = NewsLink
    extra = 0
    readonly_fields = ("entity_type", "entity_id")

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(News)
class NewsAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "created_by", "created_at")
    search_fields = ("title", "content")
    inlines = [NewsLinkInline]
