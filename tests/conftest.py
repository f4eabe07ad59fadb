from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from apps.core.models import Role, User
from apps.domains.classroom.models import Assignment, Classroom, Module, ModuleFolder


def make_user(username, role=Role.PRAKTIKAN):
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password="s3cret-pass",
        role=role,
    )


@pytest.fixture
def aslab(db):
    return make_user("aslab1", Role.ASLAB)


@pytest.fixture
def other_aslab(db):
    return make_user("aslab2", Role.ASLAB)


@pytest.fixture
def praktikan(db):
    return make_user("praktikan1")


@pytest.fixture
def other_praktikan(db):
    return make_user("praktikan2")


@pytest.fixture
def classroom(aslab):
    return Classroom.objects.create(title="Basis Data", description="BD 2024", created_by=aslab)


@pytest.fixture
def folder(classroom, aslab):
    return ModuleFolder.objects.create(classroom=classroom, title="Minggu 1", created_by=aslab)


@pytest.fixture
def module(classroom, folder, aslab):
    return Module.objects.create(
        classroom=classroom,
        folder=folder,
        title="Normalisasi",
        content="1NF, 2NF, 3NF",
        created_by=aslab,
    )


@pytest.fixture
def assignment(classroom, aslab):
    return Assignment.objects.create(
        classroom=classroom,
        title="Tugas ERD",
        description="Buat ERD perpustakaan",
        deadline=timezone.now() + timedelta(days=7),
        created_by=aslab,
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return _client


@pytest.fixture
def uploads(monkeypatch):
    """R2 업로드 대체: 호출 기록 후 가짜 URL 반환."""
    calls = []

    def fake_upload(fileobj, folder):
        calls.append((getattr(fileobj, "name", None), folder))
        return f"https://cdn.test.invalid/{folder}/{len(calls)}.png"

    monkeypatch.setattr("apps.domains.linking.services.upload_file", fake_upload)
    monkeypatch.setattr("apps.domains.classroom.views.upload_file", fake_upload)
    monkeypatch.setattr("apps.core.views.upload_file", fake_upload)
    return calls
