from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from apps.domains.linking import EntityNotFound, InvalidEntityKind, LinkRef, LinkStore
from apps.domains.news.models import News, NewsLink
from apps.domains.social.models import Post, PostLink

pytestmark = pytest.mark.django_db


@pytest.fixture
def store():
    return LinkStore(NewsLink)


@pytest.fixture
def news(aslab):
    return News.objects.create(title="Midterm info", content="Room 3.1", created_by=aslab)


def test_set_then_get(store, news, classroom):
    ref = store.set_link(news.id, "class", classroom.id)
    assert ref == LinkRef("class", classroom.id)
    assert store.get_link(news.id) == LinkRef("class", classroom.id)


def test_get_link_absent(store, news):
    assert store.get_link(news.id) is None


def test_set_link_twice_keeps_single_row(store, news, classroom, module):
    store.set_link(news.id, "class", classroom.id)
    store.set_link(news.id, "class", classroom.id)
    assert NewsLink.objects.filter(owner_id=news.id).count() == 1

    store.set_link(news.id, "module", module.id)
    assert NewsLink.objects.filter(owner_id=news.id).count() == 1
    assert store.get_link(news.id) == LinkRef("module", module.id)


def test_set_link_rejects_unknown_kind(store, news):
    with pytest.raises(InvalidEntityKind):
        store.set_link(news.id, "folder", 1)
    assert store.get_link(news.id) is None


def test_set_link_missing_target_leaves_owner_untouched(store, news, assignment):
    store.set_link(news.id, "assignment", assignment.id)
    with pytest.raises(EntityNotFound) as exc:
        store.set_link(news.id, "class", 424242)
    assert str(exc.value.detail) == "Class not found"

    news.refresh_from_db()
    assert news.title == "Midterm info"
    assert store.get_link(news.id) == LinkRef("assignment", assignment.id)


def test_set_link_rejects_non_integer_id(store, news):
    with pytest.raises(ValidationError):
        store.set_link(news.id, "class", "abc")


def test_clear_link_is_noop_when_absent(store, news, classroom):
    assert store.clear_link(news.id) is False
    store.set_link(news.id, "class", classroom.id)
    assert store.clear_link(news.id) is True
    assert store.get_link(news.id) is None


def test_owner_delete_cascades(store, news, classroom):
    store.set_link(news.id, "class", classroom.id)
    news_id = news.id
    news.delete()
    assert store.get_link(news_id) is None
    assert not NewsLink.objects.exists()


def test_list_owners_newest_first(store, aslab, classroom, module):
    now = timezone.now()
    older = News.objects.create(title="old", content="x", created_by=aslab)
    newer = News.objects.create(title="new", content="y", created_by=aslab)
    other = News.objects.create(title="other", content="z", created_by=aslab)
    News.objects.filter(pk=older.pk).update(created_at=now - timedelta(days=2))
    News.objects.filter(pk=newer.pk).update(created_at=now - timedelta(days=1))

    store.set_link(older.id, "class", classroom.id)
    store.set_link(newer.id, "class", classroom.id)
    store.set_link(other.id, "module", module.id)

    assert store.list_owners_linked_to("class", classroom.id) == [newer.id, older.id]
    assert store.list_owners_linked_to("module", module.id) == [other.id]
    assert store.list_owners_linked_to("assignment", 1) == []


def test_list_owners_validates_kind(store):
    with pytest.raises(InvalidEntityKind):
        store.list_owners_linked_to("user", 1)


def test_stores_are_isolated_per_owner_table(praktikan, aslab, classroom):
    news = News.objects.create(title="n", content="c", created_by=aslab)
    post = Post.objects.create(user=praktikan, content="hello")
    LinkStore(NewsLink).set_link(news.id, "class", classroom.id)

    assert LinkStore(PostLink).get_link(post.id) is None
    assert LinkStore(PostLink).list_owners_linked_to("class", classroom.id) == []
