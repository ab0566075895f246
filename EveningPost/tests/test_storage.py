from __future__ import annotations

import random
from datetime import datetime, timezone

from EveningPost.core import schemas
from EveningPost.core.seed_data import SAMPLE_ARTICLES, SAMPLE_CATEGORIES, seed_store
from EveningPost.core.storage import FEATURED_LIMIT, LATEST_LIMIT, TRENDING_LIMIT, ContentStore


def _article_payload(**overrides) -> schemas.ArticleCreate:
    data = {
        "title": "Local Library Extends Opening Hours",
        "slug": "local-library-extends-opening-hours",
        "excerpt": "Residents get late-night access starting next month.",
        "content": "The city library will stay open until 10pm on weekdays.",
        "category_id": 5,
        "author": "Dana Lee",
        "published_at": datetime(2024, 1, 5, 8, 0, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return schemas.ArticleCreate(**data)


def test_every_seeded_category_resolves_by_slug(store: ContentStore) -> None:
    for seeded in SAMPLE_CATEGORIES:
        category = store.get_category_by_slug(seeded.slug)
        assert category is not None
        assert category.name == seeded.name
        assert sum(1 for c in store.get_all_categories() if c.slug == seeded.slug) == 1


def test_category_count_matches_seed(store: ContentStore) -> None:
    assert len(store.get_all_categories()) == len(SAMPLE_CATEGORIES)
    assert [c.id for c in store.get_all_categories()] == list(range(1, len(SAMPLE_CATEGORIES) + 1))


def test_all_articles_newest_first(store: ContentStore) -> None:
    articles = store.get_all_articles()
    assert len(articles) == len(SAMPLE_ARTICLES)
    dates = [a.published_at for a in articles]
    assert dates == sorted(dates, reverse=True)


def test_latest_articles_are_most_recent(store: ContentStore) -> None:
    latest = store.get_latest_articles()
    assert len(latest) <= LATEST_LIMIT
    dates = [a.published_at for a in latest]
    assert dates == sorted(dates, reverse=True)
    assert latest[0].slug == "medvisual-new-chapter-bangladesh-healthcare-innovation"
    assert [a.id for a in latest] == [9, 1, 2]


def test_featured_articles_put_flagged_articles_first(store: ContentStore) -> None:
    featured = store.get_featured_articles()
    assert len(featured) <= FEATURED_LIMIT
    assert all(a.is_featured in (0, 1) for a in featured)
    assert [a.id for a in featured] == [1, 9, 2]


def test_featured_articles_skip_unknown_flag_values() -> None:
    store = ContentStore()
    store.create_article(_article_payload(slug="odd-flag", is_featured=2))
    store.create_article(_article_payload(slug="no-flag", is_featured=None))
    store.create_article(_article_payload(slug="plain", is_featured=0))
    assert [a.slug for a in store.get_featured_articles()] == ["plain"]


def test_trending_is_reproducible_with_seeded_rng() -> None:
    first = ContentStore(rng=random.Random(42))
    second = ContentStore(rng=random.Random(42))
    seed_store(first)
    seed_store(second)

    trending = first.get_trending_articles()
    assert len(trending) == TRENDING_LIMIT
    assert len({a.id for a in trending}) == TRENDING_LIMIT
    assert [a.id for a in trending] == [a.id for a in second.get_trending_articles()]


def test_trending_never_exceeds_catalog_size() -> None:
    store = ContentStore()
    store.create_article(_article_payload())
    assert len(store.get_trending_articles()) == 1


def test_articles_by_category_filters_and_sorts(store: ContentStore) -> None:
    technology = store.get_category_by_slug("technology")
    articles = store.get_articles_by_category_id(technology.id)
    assert articles
    assert all(a.category_id == technology.id for a in articles)
    assert [a.slug for a in articles] == [
        "medvisual-new-chapter-bangladesh-healthcare-innovation",
        "new-ai-breakthrough-could-transform-healthcare",
    ]
    assert store.get_articles_by_category_id(999) == []


def test_create_article_assigns_next_id(store: ContentStore) -> None:
    previous_max = max(store.articles)
    created = store.create_article(_article_payload())
    assert created.id == previous_max + 1
    assert store.get_article_by_id(created.id) is created
    assert store.get_article_by_slug(created.slug) is created


def test_duplicate_slug_returns_first_inserted() -> None:
    store = ContentStore()
    first = store.create_article(_article_payload(title="First"))
    store.create_article(_article_payload(title="Second"))
    assert store.get_article_by_slug(first.slug) is first


def test_naive_publish_date_is_treated_as_utc() -> None:
    store = ContentStore()
    article = store.create_article(_article_payload(published_at=datetime(2024, 3, 1, 12, 0)))
    assert article.published_at.tzinfo is not None
    assert article.published_at == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_category_lookup_by_id(store: ContentStore) -> None:
    science = store.get_category_by_id(4)
    assert science is not None
    assert science.slug == "science"
    assert science.name == "Science"
    assert store.get_category_by_id(science.id) is store.get_category_by_slug("science")


def test_lookups_return_none_on_miss(store: ContentStore) -> None:
    assert store.get_article_by_id(12345) is None
    assert store.get_article_by_slug("does-not-exist") is None
    assert store.get_category_by_id(12345) is None
    assert store.get_category_by_slug("does-not-exist") is None
    assert store.get_user(1) is None
    assert store.get_user_by_username("nobody") is None


def test_users_round_trip() -> None:
    store = ContentStore()
    editor = store.create_user(schemas.UserCreate(username="editor", password="s3cret"))
    reporter = store.create_user(schemas.UserCreate(username="reporter", password="hunter2"))
    assert (editor.id, reporter.id) == (1, 2)
    assert store.get_user(reporter.id) is reporter
    assert store.get_user_by_username("editor") is editor


def test_category_name_lookup(store: ContentStore) -> None:
    assert store.category_names() == {
        1: "Politics",
        2: "Business",
        3: "Technology",
        4: "Science",
        5: "World",
        6: "Sports",
    }
    assert store.category_name(5) == "World"
    assert store.category_name(7) == "News"


def test_seeding_twice_is_a_no_op(store: ContentStore) -> None:
    seed_store(store)
    assert len(store.articles) == len(SAMPLE_ARTICLES)
    assert len(store.categories) == len(SAMPLE_CATEGORIES)
