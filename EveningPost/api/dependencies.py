from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from EveningPost.core.config import Settings
from EveningPost.core.storage import ContentStore


def get_store(request: Request) -> ContentStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


Store = Annotated[ContentStore, Depends(get_store)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
