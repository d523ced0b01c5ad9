# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Comment, Post


class PostRepository(Protocol):
    def list_all(self) -> Sequence[Post]: ...
    def exists(self, post_id: int) -> bool: ...
    def add(self, title: str, content: str, author_id: int) -> Post: ...

    # update/delete return False when no row matched.
    def update(self, post_id: int, *, title: str | None, content: str | None) -> bool: ...
    def delete(self, post_id: int) -> bool: ...


class CommentRepository(Protocol):
    def list_all(self) -> Sequence[Comment]: ...
    def add(self, content: str, post_id: int) -> Comment: ...
    def update(self, comment_id: int, *, content: str) -> bool: ...
    def delete(self, comment_id: int) -> bool: ...
