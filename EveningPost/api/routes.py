from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from EveningPost.core.schemas import ArticleRead, CategoryRead, ErrorResponse

from .dependencies import Store

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}

articles_router = APIRouter(prefix="/api/articles", tags=["Articles"])
categories_router = APIRouter(prefix="/api/categories", tags=["Categories"])


@articles_router.get("", response_model=List[ArticleRead])
def list_articles(store: Store):
    return store.get_all_articles()


@articles_router.get("/featured", response_model=List[ArticleRead])
def featured_articles(store: Store):
    return store.get_featured_articles()


@articles_router.get("/latest", response_model=List[ArticleRead])
def latest_articles(store: Store):
    return store.get_latest_articles()


@articles_router.get("/trending", response_model=List[ArticleRead])
def trending_articles(store: Store):
    return store.get_trending_articles()


@articles_router.get("/by-category/{slug}", response_model=List[ArticleRead], responses=NOT_FOUND)
def articles_by_category(slug: str, store: Store):
    category = store.get_category_by_slug(slug)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return store.get_articles_by_category_id(category.id)


@articles_router.get("/{slug}", response_model=ArticleRead, responses=NOT_FOUND)
def get_article(slug: str, store: Store):
    article = store.get_article_by_slug(slug)
    if article is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return article


@categories_router.get("", response_model=List[CategoryRead])
def list_categories(store: Store):
    return store.get_all_categories()


@categories_router.get("/{slug}", response_model=CategoryRead, responses=NOT_FOUND)
def get_category(slug: str, store: Store):
    category = store.get_category_by_slug(slug)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category
