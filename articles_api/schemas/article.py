# File: articles_api/schemas/article.py

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, field_validator


class ArticleBase(BaseModel):
    title: str
    body: str
    category: str

    @field_validator("title", "body", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v


class ArticleCreate(ArticleBase):
    pass


class ArticleResponse(ArticleBase):
    id: int
    submitted_by: int
    created_at: datetime

    class Config:
        from_attributes = True


class ArticleCreatedResponse(BaseModel):
    message: str
    article: ArticleResponse


class ArticleWithAuthor(ArticleResponse):
    """Article row joined with its author's public identity."""

    author_username: str
    author_email: str
