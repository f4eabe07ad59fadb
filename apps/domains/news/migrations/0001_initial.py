import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="News",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=100)),
                ("content", models.TextField()),
                ("image_url", models.URLField(blank=True, max_length=255, null=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="news",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "News",
                "verbose_name_plural": "News",
                "db_table": "news",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="NewsLink",
            fields=[
                (
                    "owner",
                    models.OneToOneField(
                        db_column="news_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="link",
                        serialize=False,
                        to="news.news",
                    ),
                ),
                (
                    "entity_type",
                    models.CharField(
                        choices=[("class", "Class"), ("module", "Module"), ("assignment", "Assignment")],
                        max_length=20,
                    ),
                ),
                ("entity_id", models.PositiveBigIntegerField()),
            ],
            options={
                "db_table": "news_entities",
                "indexes": [
                    models.Index(fields=["entity_type", "entity_id"], name="news_newslink_target"),
                ],
            },
        ),
    ]
