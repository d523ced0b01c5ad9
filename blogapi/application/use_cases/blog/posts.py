# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from blogapi.domain.blog.entities import Post
from blogapi.domain.blog.exceptions import PostNotFoundError
from blogapi.domain.blog.repositories import PostRepository


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self) -> Sequence[Post]:
        return self._posts.list_all()


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, *, title: str, content: str, author_id: int) -> Post:
        return self._posts.add(title, content, author_id)


class UpdatePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: int, *, title: str | None, content: str | None) -> None:
        if not self._posts.update(post_id, title=title, content=content):
            raise PostNotFoundError(post_id)


class DeletePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: int) -> None:
        if not self._posts.delete(post_id):
            raise PostNotFoundError(post_id)
