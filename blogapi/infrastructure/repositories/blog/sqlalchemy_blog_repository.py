# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import joinedload

from blogapi.domain.blog.entities import AuthorRef, PostRef
from blogapi.domain.blog.entities import Comment as DomainComment
from blogapi.domain.blog.entities import Post as DomainPost
from blogapi.domain.blog.repositories import CommentRepository, PostRepository
from blogapi.infrastructure.db.models import Comment, Post
from blogapi.infrastructure.unit_of_work import SessionFactory, unit_of_work_scope


def _post_to_domain(row: Post) -> DomainPost:
    author = AuthorRef(id=row.author.id, username=row.author.username) if row.author else None
    return DomainPost(id=row.id, title=row.title, content=row.content, author=author)


def _comment_to_domain(row: Comment) -> DomainComment:
    post = PostRef(id=row.post.id, title=row.post.title) if row.post else None
    return DomainComment(id=row.id, content=row.content, post=post)


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainPost]:
        with unit_of_work_scope(self._session_factory, "posts.list") as session:
            rows = (
                session.query(Post)
                .options(joinedload(Post.author))
                .order_by(Post.id.asc())
                .all()
            )
            return [_post_to_domain(row) for row in rows]

    def exists(self, post_id: int) -> bool:
        with unit_of_work_scope(self._session_factory, "posts.exists") as session:
            return session.get(Post, post_id) is not None

    def add(self, title: str, content: str, author_id: int) -> DomainPost:
        with unit_of_work_scope(self._session_factory, "posts.add") as session:
            row = Post(title=title, content=content, author_id=author_id)
            session.add(row)
            session.flush()
            return DomainPost(id=row.id, title=row.title, content=row.content)

    def update(self, post_id: int, *, title: str | None, content: str | None) -> bool:
        with unit_of_work_scope(self._session_factory, "posts.update") as session:
            row = session.get(Post, post_id)
            if row is None:
                return False
            if title is not None:
                row.title = title
            if content is not None:
                row.content = content
            return True

    def delete(self, post_id: int) -> bool:
        with unit_of_work_scope(self._session_factory, "posts.delete") as session:
            row = session.get(Post, post_id)
            if row is None:
                return False
            session.delete(row)
            return True


class SqlAlchemyCommentRepository(CommentRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainComment]:
        with unit_of_work_scope(self._session_factory, "comments.list") as session:
            rows = (
                session.query(Comment)
                .options(joinedload(Comment.post))
                .order_by(Comment.id.asc())
                .all()
            )
            return [_comment_to_domain(row) for row in rows]

    def add(self, content: str, post_id: int) -> DomainComment:
        with unit_of_work_scope(self._session_factory, "comments.add") as session:
            row = Comment(content=content, post_id=post_id)
            session.add(row)
            session.flush()
            return DomainComment(id=row.id, content=row.content)

    def update(self, comment_id: int, *, content: str) -> bool:
        with unit_of_work_scope(self._session_factory, "comments.update") as session:
            row = session.get(Comment, comment_id)
            if row is None:
                return False
            row.content = content
            return True

    def delete(self, comment_id: int) -> bool:
        with unit_of_work_scope(self._session_factory, "comments.delete") as session:
            row = session.get(Comment, comment_id)
            if row is None:
                return False
            session.delete(row)
            return True
