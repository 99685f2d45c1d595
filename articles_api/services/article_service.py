# File: articles_api/services/article_service.py

"""
Article queries and creation.

Reads are public and side-effect free. ``submitted_by`` is always taken
from the authenticated caller, never from the request body.
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from articles_api.core.errors import InternalError
from articles_api.models.article import Article
from articles_api.models.user import User
from articles_api.schemas.article import ArticleCreate, ArticleWithAuthor

logger = logging.getLogger(__name__)


def _newest_first(stmt):
    return stmt.order_by(Article.created_at.desc(), Article.id.desc())


def list_articles(db: Session) -> Sequence[Article]:
    try:
        return db.scalars(_newest_first(select(Article))).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch articles")
        raise InternalError("Failed to fetch articles")


def list_articles_by_user(db: Session, user_id: int) -> Sequence[Article]:
    try:
        stmt = select(Article).where(Article.submitted_by == user_id)
        return db.scalars(_newest_first(stmt)).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch articles for user %s", user_id)
        raise InternalError("Failed to fetch articles")


def list_articles_with_author(db: Session, user_id: int) -> list[ArticleWithAuthor]:
    stmt = (
        select(Article, User.username, User.email)
        .join(User, Article.submitted_by == User.id)
        .where(Article.submitted_by == user_id)
    )
    try:
        rows = db.execute(_newest_first(stmt)).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch posts with author for user %s", user_id)
        raise InternalError("Failed to fetch posts")

    return [
        ArticleWithAuthor(
            id=article.id,
            title=article.title,
            body=article.body,
            category=article.category,
            submitted_by=article.submitted_by,
            created_at=article.created_at,
            author_username=username,
            author_email=email,
        )
        for article, username, email in rows
    ]


def create_article(db: Session, payload: ArticleCreate, author_id: int) -> Article:
    article = Article(
        title=payload.title,
        body=payload.body,
        category=payload.category,
        submitted_by=author_id,
    )
    try:
        db.add(article)
        db.commit()
        db.refresh(article)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create article for user %s", author_id)
        raise InternalError("Failed to create article")

    logger.info("Article %s created by user %s", article.id, author_id)
    return article
