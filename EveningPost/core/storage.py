from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from . import models, schemas

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 3
LATEST_LIMIT = 3
TRENDING_LIMIT = 5
FALLBACK_CATEGORY_NAME = "News"


class ContentStore:
    """In-memory catalog of articles, categories and users.

    Records live in dicts keyed by a sequential integer id. Every query is a
    linear scan over insertion order; lookups return ``None`` on a miss and
    leave turning that into an HTTP error to the caller.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.users: Dict[int, models.User] = {}
        self.articles: Dict[int, models.Article] = {}
        self.categories: Dict[int, models.Category] = {}
        self._user_seq = 0
        self._article_seq = 0
        self._category_seq = 0
        self._rng = rng or random.Random()

    # User helpers
    def get_user(self, user_id: int) -> Optional[models.User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[models.User]:
        return next((u for u in self.users.values() if u.username == username), None)

    def create_user(self, payload: schemas.UserCreate) -> models.User:
        self._user_seq += 1
        user = models.User(id=self._user_seq, **payload.model_dump())
        self.users[user.id] = user
        logger.debug("Created user %s (%s)", user.id, user.username)
        return user

    # Article helpers
    def get_all_articles(self) -> List[models.Article]:
        return self._newest_first(self.articles.values())

    def get_article_by_id(self, article_id: int) -> Optional[models.Article]:
        return self.articles.get(article_id)

    def get_article_by_slug(self, slug: str) -> Optional[models.Article]:
        return next((a for a in self.articles.values() if a.slug == slug), None)

    def get_featured_articles(self) -> List[models.Article]:
        # Both flag values pass the filter; the sort only moves featured ones to the front.
        rows = [a for a in self.articles.values() if a.is_featured in (0, 1)]
        rows.sort(key=lambda a: a.is_featured, reverse=True)
        return rows[:FEATURED_LIMIT]

    def get_latest_articles(self) -> List[models.Article]:
        return self._newest_first(self.articles.values())[:LATEST_LIMIT]

    def get_trending_articles(self) -> List[models.Article]:
        rows = list(self.articles.values())
        self._rng.shuffle(rows)
        return rows[:TRENDING_LIMIT]

    def get_articles_by_category_id(self, category_id: int) -> List[models.Article]:
        return self._newest_first(a for a in self.articles.values() if a.category_id == category_id)

    def create_article(self, payload: schemas.ArticleCreate) -> models.Article:
        self._article_seq += 1
        article = models.Article(id=self._article_seq, **payload.model_dump())
        self.articles[article.id] = article
        logger.debug("Created article %s (%s)", article.id, article.slug)
        return article

    # Category helpers
    def get_all_categories(self) -> List[models.Category]:
        return list(self.categories.values())

    def get_category_by_id(self, category_id: int) -> Optional[models.Category]:
        return self.categories.get(category_id)

    def get_category_by_slug(self, slug: str) -> Optional[models.Category]:
        return next((c for c in self.categories.values() if c.slug == slug), None)

    def create_category(self, payload: schemas.CategoryCreate) -> models.Category:
        self._category_seq += 1
        category = models.Category(id=self._category_seq, **payload.model_dump())
        self.categories[category.id] = category
        logger.debug("Created category %s (%s)", category.id, category.slug)
        return category

    def category_names(self) -> Dict[int, str]:
        """Id to display-name table for clients rendering category tags."""
        return {c.id: c.name for c in self.categories.values()}

    def category_name(self, category_id: int) -> str:
        """Display name for an article's category_id; unknown ids read as "News"."""
        category = self.categories.get(category_id)
        return category.name if category else FALLBACK_CATEGORY_NAME

    @staticmethod
    def _newest_first(articles) -> List[models.Article]:
        return sorted(articles, key=lambda a: a.published_at, reverse=True)
