import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.domains.news.models import News, NewsLink

pytestmark = pytest.mark.django_db

NEWS_URL = "/api/v1/news/"


def _create(client, **body):
    body.setdefault("title", "Pengumuman")
    body.setdefault("content", "Praktikum minggu ini online")
    return client.post(NEWS_URL, body, format="json")


def test_create_linked_then_update_clears_link(client_for, aslab, classroom):
    client = client_for(aslab)

    res = _create(client, title="Pengumuman UTS", entityType="class", entityId=classroom.id)
    assert res.status_code == 201
    body = res.json()
    assert body["title"] == "Pengumuman UTS"
    assert body["author"] == "aslab1"
    assert body["linked_type"] == "class"
    assert body["linked_id"] == classroom.id
    assert body["class_title"] == "Basis Data"
    assert body["class_id"] == classroom.id
    assert body["module_title"] is None
    news_id = body["id"]

    res = client.put(f"{NEWS_URL}{news_id}/", {"title": "Pengumuman UTS", "content": "revisi"}, format="json")
    assert res.status_code == 200
    assert res.json()["linked_type"] is None

    listed = {item["id"]: item for item in client.get(NEWS_URL).json()}
    assert listed[news_id]["linked_type"] is None
    assert listed[news_id]["class_title"] is None
    assert not NewsLink.objects.exists()


def test_linked_alias_fields_accepted(client_for, aslab, module):
    res = _create(client_for(aslab), linkedType="module", linkedId=module.id)
    assert res.status_code == 201
    assert res.json()["module_title"] == "Normalisasi"


def test_public_reads(api_client, client_for, aslab, classroom):
    created = _create(client_for(aslab), entityType="class", entityId=classroom.id).json()

    res = api_client.get(NEWS_URL)
    assert res.status_code == 200
    assert [n["id"] for n in res.json()] == [created["id"]]

    res = api_client.get(f"{NEWS_URL}{created['id']}/")
    assert res.status_code == 200
    assert res.json()["class_title"] == "Basis Data"

    res = api_client.get(f"{NEWS_URL}for/class/{classroom.id}/")
    assert res.status_code == 200
    assert [n["id"] for n in res.json()] == [created["id"]]


def test_retrieve_missing_news(api_client):
    res = api_client.get(f"{NEWS_URL}424242/")
    assert res.status_code == 404
    assert res.json()["detail"] == "News not found"


def test_for_entity_newest_first_and_invalid_kind(api_client, client_for, aslab, assignment):
    client = client_for(aslab)
    first = _create(client, title="a", entityType="assignment", entityId=assignment.id).json()
    _create(client, title="unlinked")
    second = _create(client, title="b", entityType="assignment", entityId=assignment.id).json()

    res = api_client.get(f"{NEWS_URL}for/assignment/{assignment.id}/")
    assert [n["id"] for n in res.json()] == [second["id"], first["id"]]

    res = api_client.get(f"{NEWS_URL}for/folder/{assignment.id}/")
    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid entity type"


def test_create_requires_auth_and_aslab(api_client, client_for, praktikan):
    assert _create(api_client).status_code == 401

    res = _create(client_for(praktikan), entityType="bogus")
    assert res.status_code == 403
    assert not News.objects.exists()


def test_create_validation_errors(client_for, aslab, classroom):
    client = client_for(aslab)

    res = _create(client, entityType="folder", entityId=classroom.id)
    assert res.status_code == 400

    res = _create(client, entityType="class")
    assert res.status_code == 400

    res = client.post(NEWS_URL, {"content": "no title"}, format="json")
    assert res.status_code == 400

    res = _create(client, entityType="module", entityId=424242)
    assert res.status_code == 404
    assert res.json()["detail"] == "Module not found"

    assert not News.objects.exists()


def test_link_and_unlink(client_for, aslab, classroom, module):
    client = client_for(aslab)
    news_id = _create(client, entityType="class", entityId=classroom.id).json()["id"]

    res = client.post(f"{NEWS_URL}{news_id}/link/module/{module.id}/")
    assert res.status_code == 200
    assert res.json() == {
        "message": "Entity linked successfully",
        "linked_type": "module",
        "linked_id": module.id,
    }
    assert client.get(f"{NEWS_URL}{news_id}/").json()["module_title"] == "Normalisasi"
    assert NewsLink.objects.count() == 1

    res = client.delete(f"{NEWS_URL}{news_id}/unlink/")
    assert res.status_code == 200
    assert client.get(f"{NEWS_URL}{news_id}/").json()["linked_type"] is None

    # 링크 없는 상태에서 다시 unlink 해도 성공
    assert client.delete(f"{NEWS_URL}{news_id}/unlink/").status_code == 200


def test_link_error_ordering(client_for, aslab, praktikan, classroom):
    news_id = _create(client_for(aslab)).json()["id"]

    res = client_for(praktikan).post(f"{NEWS_URL}424242/link/class/{classroom.id}/")
    assert res.status_code == 404

    res = client_for(praktikan).post(f"{NEWS_URL}{news_id}/link/bogus/1/")
    assert res.status_code == 403

    res = client_for(aslab).post(f"{NEWS_URL}{news_id}/link/bogus/1/")
    assert res.status_code == 400

    res = client_for(aslab).post(f"{NEWS_URL}{news_id}/link/class/424242/")
    assert res.status_code == 404
    assert res.json()["detail"] == "Class not found"


def test_update_and_delete_by_non_owner(client_for, aslab, praktikan):
    news_id = _create(client_for(aslab)).json()["id"]
    client = client_for(praktikan)

    res = client.put(f"{NEWS_URL}{news_id}/", {"title": "x", "content": "y"}, format="json")
    assert res.status_code == 403
    assert client.delete(f"{NEWS_URL}{news_id}/").status_code == 403
    assert News.objects.filter(pk=news_id).exists()


def test_delete_news(client_for, aslab, classroom):
    client = client_for(aslab)
    news_id = _create(client, entityType="class", entityId=classroom.id).json()["id"]

    res = client.delete(f"{NEWS_URL}{news_id}/")
    assert res.status_code == 200
    assert res.json() == {"message": "News deleted successfully"}
    assert not News.objects.exists()
    assert not NewsLink.objects.exists()
    assert client.delete(f"{NEWS_URL}{news_id}/").status_code == 404


def test_multipart_create_with_image(client_for, aslab, classroom, uploads):
    image = SimpleUploadedFile("banner.png", b"\x89PNG fake", content_type="image/png")
    res = client_for(aslab).post(
        NEWS_URL,
        {
            "title": "Poster",
            "content": "lihat gambar",
            "entityType": "class",
            "entityId": str(classroom.id),
            "image": image,
        },
        format="multipart",
    )
    assert res.status_code == 201
    body = res.json()
    assert body["image_url"] == "https://cdn.test.invalid/news/1.png"
    assert body["class_title"] == "Basis Data"
    assert uploads == [("banner.png", "news")]


def test_conflicting_alias_fields_rejected(client_for, aslab, classroom, module):
    client = client_for(aslab)

    res = _create(client, entityType="class", linkedType="module", entityId=classroom.id)
    assert res.status_code == 400
    assert "linkedType" in res.json()

    res = _create(client, entityType="module", entityId=module.id, linkedId=module.id + 1000)
    assert res.status_code == 400
    assert "linkedId" in res.json()
    assert not News.objects.exists()

    res = _create(client, entityType="class", linkedType="class", entityId=classroom.id)
    assert res.status_code == 201
    assert res.json()["class_title"] == "Basis Data"
