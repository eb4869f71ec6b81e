"""
News Routes
"""

from typing import List
from fastapi import APIRouter, Depends, status
from placement_portal.auth import get_tpo_admin
from placement_portal.schemas.notification import NewsCreate, NewsUpdate, NewsResponse
from placement_portal.services.notification_service import news_service

router = APIRouter()


@router.get("", response_model=List[NewsResponse])
async def list_news():
    return await news_service.list()


@router.get("/{news_id}", response_model=NewsResponse)
async def get_news(news_id: int):
    return await news_service.get(news_id)


@router.post("", response_model=NewsResponse, status_code=status.HTTP_201_CREATED)
async def create_news(request: NewsCreate, current_admin: dict = Depends(get_tpo_admin)):
    return await news_service.create(request.model_dump())


@router.put("/{news_id}", response_model=NewsResponse)
async def update_news(news_id: int, request: NewsUpdate, current_admin: dict = Depends(get_tpo_admin)):
    return await news_service.update(news_id, request.model_dump(exclude_unset=True))


@router.delete("/{news_id}")
async def delete_news(news_id: int, current_admin: dict = Depends(get_tpo_admin)):
    return await news_service.delete(news_id)
