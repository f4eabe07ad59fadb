from django.apps import AppConfig


class SocialConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.social"
    label = "social"
    verbose_name = "Social feed"
