from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    username: str
    password: str
    id: int = 0


@dataclass
class Category:
    name: str
    slug: str
    id: int = 0


@dataclass
class Article:
    title: str
    slug: str
    excerpt: str
    content: str
    category_id: int
    author: str
    published_at: datetime
    image_url: Optional[str] = None
    # 1 marks the hero article; anything other than 0/1 is ignored by the featured query.
    is_featured: Optional[int] = 0
    id: int = 0
