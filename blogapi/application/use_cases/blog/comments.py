# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from blogapi.domain.blog.entities import Comment
from blogapi.domain.blog.exceptions import CommentNotFoundError, PostNotFoundError
from blogapi.domain.blog.repositories import CommentRepository, PostRepository


class ListCommentsUseCase:
    def __init__(self, *, comments: CommentRepository) -> None:
        self._comments = comments

    def execute(self) -> Sequence[Comment]:
        return self._comments.list_all()


class CreateCommentUseCase:
    def __init__(self, *, comments: CommentRepository, posts: PostRepository) -> None:
        self._comments = comments
        self._posts = posts

    def execute(self, *, content: str, post_id: int) -> Comment:
        if not self._posts.exists(post_id):
            raise PostNotFoundError(post_id)
        return self._comments.add(content, post_id)


class UpdateCommentUseCase:
    def __init__(self, *, comments: CommentRepository) -> None:
        self._comments = comments

    def execute(self, comment_id: int, *, content: str) -> None:
        if not self._comments.update(comment_id, content=content):
            raise CommentNotFoundError(comment_id)


class DeleteCommentUseCase:
    def __init__(self, *, comments: CommentRepository) -> None:
        self._comments = comments

    def execute(self, comment_id: int) -> None:
        if not self._comments.delete(comment_id):
            raise CommentNotFoundError(comment_id)
