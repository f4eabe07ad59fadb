import pytest

from apps.domains.social.models import Comment, Post, PostLink

pytestmark = pytest.mark.django_db

POSTS_URL = "/api/v1/social/posts/"
COMMENTS_URL = "/api/v1/social/comments/"


def _post(client, **body):
    body.setdefault("content", "Ada yang sudah selesai tugas?")
    return client.post(POSTS_URL, body, format="json")


def test_posts_require_auth(api_client):
    assert api_client.get(POSTS_URL).status_code == 401
    assert _post(api_client).status_code == 401


def test_create_post_with_link(client_for, praktikan, assignment):
    res = _post(client_for(praktikan), entityType="assignment", entityId=assignment.id)
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "praktikan1"
    assert body["comment_count"] == 0
    assert body["linked_type"] == "assignment"
    assert body["assignment_title"] == "Tugas ERD"
    assert body["assignment_id"] == assignment.id


def test_create_post_invalid_kind(client_for, praktikan):
    res = _post(client_for(praktikan), entityType="folder", entityId=1)
    assert res.status_code == 400
    assert not Post.objects.exists()


def test_list_with_comment_count(client_for, praktikan, other_praktikan):
    client = client_for(praktikan)
    post_id = _post(client).json()["id"]
    _post(client, content="kedua")

    other = client_for(other_praktikan)
    for text in ("satu", "dua"):
        res = other.post(f"{POSTS_URL}{post_id}/comments/", {"content": text}, format="json")
        assert res.status_code == 201

    listed = client.get(POSTS_URL).json()
    assert [p["content"] for p in listed] == ["kedua", "Ada yang sudah selesai tugas?"]
    assert {p["id"]: p["comment_count"] for p in listed}[post_id] == 2


def test_post_detail_includes_comments(client_for, praktikan, other_praktikan):
    post_id = _post(client_for(praktikan)).json()["id"]
    client_for(other_praktikan).post(f"{POSTS_URL}{post_id}/comments/", {"content": "pertama"}, format="json")
    client_for(praktikan).post(f"{POSTS_URL}{post_id}/comments/", {"content": "kedua"}, format="json")

    res = client_for(praktikan).get(f"{POSTS_URL}{post_id}/")
    assert res.status_code == 200
    body = res.json()
    assert body["comment_count"] == 2
    assert [c["content"] for c in body["comments"]] == ["pertama", "kedua"]
    assert body["comments"][0]["username"] == "praktikan2"


def test_comment_on_missing_post(client_for, praktikan):
    res = client_for(praktikan).post(f"{POSTS_URL}424242/comments/", {"content": "halo"}, format="json")
    assert res.status_code == 404
    assert res.json()["detail"] == "Post not found"


def test_delete_comment_permissions(client_for, praktikan, other_praktikan, aslab):
    post_id = _post(client_for(praktikan)).json()["id"]
    first = client_for(other_praktikan).post(
        f"{POSTS_URL}{post_id}/comments/", {"content": "a"}, format="json"
    ).json()["id"]
    second = client_for(other_praktikan).post(
        f"{POSTS_URL}{post_id}/comments/", {"content": "b"}, format="json"
    ).json()["id"]

    # 글 작성자라도 남의 댓글은 삭제 불가
    assert client_for(praktikan).delete(f"{COMMENTS_URL}{first}/").status_code == 403

    res = client_for(other_praktikan).delete(f"{COMMENTS_URL}{first}/")
    assert res.status_code == 200
    assert res.json() == {"message": "Comment deleted successfully"}

    assert client_for(aslab).delete(f"{COMMENTS_URL}{second}/").status_code == 200
    assert not Comment.objects.exists()
    assert client_for(aslab).delete(f"{COMMENTS_URL}{second}/").status_code == 404


def test_update_post_by_owner_and_stranger(client_for, praktikan, other_praktikan, module):
    post_id = _post(client_for(praktikan)).json()["id"]

    res = client_for(other_praktikan).put(f"{POSTS_URL}{post_id}/", {"content": "x"}, format="json")
    assert res.status_code == 403

    res = client_for(praktikan).put(
        f"{POSTS_URL}{post_id}/",
        {"content": "edit", "entityType": "module", "entityId": module.id},
        format="json",
    )
    assert res.status_code == 200
    assert res.json()["content"] == "edit"
    assert res.json()["module_title"] == "Normalisasi"


def test_for_entity_is_public(api_client, client_for, praktikan, classroom):
    post_id = _post(client_for(praktikan), entityType="class", entityId=classroom.id).json()["id"]

    res = api_client.get(f"{POSTS_URL}for/class/{classroom.id}/")
    assert res.status_code == 200
    assert [p["id"] for p in res.json()] == [post_id]


def test_delete_post_cascades(client_for, praktikan, aslab, classroom):
    post_id = _post(client_for(praktikan), entityType="class", entityId=classroom.id).json()["id"]
    client_for(aslab).post(f"{POSTS_URL}{post_id}/comments/", {"content": "hapus"}, format="json")

    res = client_for(aslab).delete(f"{POSTS_URL}{post_id}/")
    assert res.status_code == 200
    assert res.json() == {"message": "Post deleted successfully"}
    assert not Post.objects.exists()
    assert not PostLink.objects.exists()
    assert not Comment.objects.exists()


def test_post_link_unlink_by_owner(client_for, praktikan, classroom):
    client = client_for(praktikan)
    post_id = _post(client).json()["id"]

    res = client.post(f"{POSTS_URL}{post_id}/link/class/{classroom.id}/")
    assert res.json()["linked_type"] == "class"
    assert client.delete(f"{POSTS_URL}{post_id}/unlink/").status_code == 200
    assert not PostLink.objects.exists()
