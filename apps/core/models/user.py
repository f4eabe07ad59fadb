from django.db import models
from django.contrib.auth.models import AbstractUser, Group, Permission


# --------------------------------------------------
# Role
# --------------------------------------------------

class Role(models.TextChoices):
    ASLAB = "aslab", "Asisten Lab"
    PRAKTIKAN = "praktikan", "Praktikan"
    GUEST = "guest", "Guest"


PRIVILEGED_ROLES = frozenset({Role.ASLAB})


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델
    - AUTH_USER_MODEL = core.User
    - role: aslab(관리) / praktikan(학생) / guest
    """

    email = models.EmailField(unique=True)
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.PRAKTIKAN,
        db_index=True,
    )
    profile_image = models.URLField(max_length=255, blank=True, null=True)

    # auth.User 와 reverse accessor 충돌 방지
    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    class Meta:
        app_label = "core"
        db_table = "users"
        ordering = ["-id"]

    def __str__(self):
        return self.username

    @property
    def is_privileged(self) -> bool:
        return self.role in PRIVILEGED_ROLES
