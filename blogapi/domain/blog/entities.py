# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class AuthorRef:
    id: int
    username: str


@dataclass(slots=True, frozen=True)
class PostRef:
    id: int
    title: str


@dataclass(slots=True, frozen=True)
class Post:
    """A post with its author resolved; ``author`` is None once the user is gone."""

    id: int
    title: str
    content: str
    author: AuthorRef | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": (
                {"id": self.author.id, "username": self.author.username}
                if self.author
                else None
            ),
        }


@dataclass(slots=True, frozen=True)
class Comment:
    id: int
    content: str
    post: PostRef | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "post": {"id": self.post.id, "title": self.post.title} if self.post else None,
        }
