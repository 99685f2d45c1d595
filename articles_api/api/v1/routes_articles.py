# File: articles_api/api/v1/routes_articles.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from articles_api.api.deps import get_current_user_id, get_db
from articles_api.schemas.article import (
    ArticleCreate,
    ArticleCreatedResponse,
    ArticleResponse,
)
from articles_api.services.article_service import create_article, list_articles

router = APIRouter()


@router.get("", response_model=list[ArticleResponse], summary="List all articles")
def get_articles(db: Session = Depends(get_db)):
    return list_articles(db)


@router.post(
    "",
    response_model=ArticleCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an article",
)
def post_article(
    payload: ArticleCreate,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Create an article authored by the caller.

    ``submitted_by`` comes from the bearer token.
    """
    article = create_article(db, payload, author_id=current_user_id)
    return ArticleCreatedResponse(
        message="Article created",
        article=ArticleResponse.model_validate(article),
    )
