from django.contrib import admin
from .models import Post, PostLink, Comment


class PostLinkInline(admin.TabularInline):
    """링크는 API(존재 검증)로만 변경. admin에서는 조회만."""
    model = PostLink
    extra = 0
    readonly_fields = ("entity_type", "entity_id")

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "created_at")
    search_fields = ("content",)
    inlines = [PostLinkInline]


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "post", "user", "created_at")
