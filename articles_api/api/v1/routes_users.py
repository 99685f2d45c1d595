# File: articles_api/api/v1/routes_users.py

"""
User resource routes.

Mutations (PUT / PATCH / DELETE) are owner-only: the path id must match the
id carried by the bearer token. The ownership check runs before the store is
touched, so a foreign id is always 403 and a missing own id is 404.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from articles_api.api.deps import get_current_user_id, get_db
from articles_api.schemas.article import ArticleResponse, ArticleWithAuthor
from articles_api.schemas.user import UserPatch, UserReplace, UserResponse
from articles_api.services.article_service import (
    list_articles_by_user,
    list_articles_with_author,
)
from articles_api.services.user_service import (
    delete_user,
    ensure_owner,
    list_users,
    update_user,
)

router = APIRouter()


@router.get("", response_model=list[UserResponse], summary="List users")
def get_users(db: Session = Depends(get_db)):
    return list_users(db)


@router.get(
    "/{user_id}/articles",
    response_model=list[ArticleResponse],
    summary="Articles submitted by a user",
)
def get_user_articles(user_id: int, db: Session = Depends(get_db)):
    # Unknown users simply have no articles: 200 with an empty list.
    return list_articles_by_user(db, user_id)


@router.get(
    "/{user_id}/posts-with-user",
    response_model=list[ArticleWithAuthor],
    summary="Articles of a user joined with the author",
)
def get_user_posts_with_author(user_id: int, db: Session = Depends(get_db)):
    return list_articles_with_author(db, user_id)


@router.put("/{user_id}", response_model=UserResponse, summary="Replace own user")
def put_user(
    user_id: int,
    payload: UserReplace,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    ensure_owner(user_id, current_user_id, "update")
    return update_user(db, user_id, payload.model_dump())


@router.patch("/{user_id}", response_model=UserResponse, summary="Partially update own user")
def patch_user(
    user_id: int,
    payload: UserPatch,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    ensure_owner(user_id, current_user_id, "update")
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    return update_user(db, user_id, changes)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete own user",
)
def remove_user(
    user_id: int,
    current_user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    ensure_owner(user_id, current_user_id, "delete")
    delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
