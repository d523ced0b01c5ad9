# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from time import perf_counter

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from blogapi.application.use_cases.blog.posts import (
    CreatePostUseCase,
    DeletePostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blogapi.auth import auth_required, current_identity
from blogapi.interfaces.http.dto.blog import CreatedDTO, CreatePostDTO, UpdatePostDTO
from blogapi.shared.errors import InfrastructureError, StorageUnavailableError
from blogapi.shared.errors.validation import raise_validation_error
from blogapi.shared.logging import logger


class PostsController:
    def __init__(
        self,
        *,
        list_use_case: ListPostsUseCase,
        create_use_case: CreatePostUseCase,
        update_use_case: UpdatePostUseCase,
        delete_use_case: DeletePostUseCase,
    ) -> None:
        self._list = list_use_case
        self._create = create_use_case
        self._update = update_use_case
        self._delete = delete_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__)
        bp.add_url_rule("/posts", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("/posts", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/posts/<int:post_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/posts/<int:post_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    @auth_required
    def list_posts(self):
        t0 = perf_counter()
        try:
            items = self._list.execute()
        except StorageUnavailableError as exc:
            logger.exception("posts.list: err")
            raise InfrastructureError("Failed to retrieve posts", code="posts_list_failed") from exc
        dt = (perf_counter() - t0) * 1000
        logger.info(f"posts.list: ok (n={len(items)}, dt_ms={dt:.0f})")
        return jsonify([post.to_dict() for post in items])

    @auth_required
    def create(self):
        try:
            dto = CreatePostDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        identity = current_identity()
        try:
            post = self._create.execute(
                title=dto.title, content=dto.content, author_id=identity.user_id
            )
        except StorageUnavailableError as exc:
            logger.exception(f"post.create: err (user_id={identity.user_id})")
            raise InfrastructureError("Failed to create post", code="post_create_failed") from exc

        logger.info(f"post.create: ok (user_id={identity.user_id}, post_id={post.id})")
        payload = CreatedDTO(message="Post created successfully", id=post.id).model_dump()
        return jsonify(payload), HTTPStatus.CREATED

    @auth_required
    def update(self, post_id: int):
        try:
            dto = UpdatePostDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            self._update.execute(post_id, title=dto.title, content=dto.content)
        except StorageUnavailableError as exc:
            logger.exception(f"post.update: err (post_id={post_id})")
            raise InfrastructureError("Failed to update post", code="post_update_failed") from exc

        logger.info(f"post.update: ok (user_id={current_identity().user_id}, post_id={post_id})")
        return jsonify({"message": "Post updated successfully"})

    @auth_required
    def delete(self, post_id: int):
        try:
            self._delete.execute(post_id)
        except StorageUnavailableError as exc:
            logger.exception(f"post.delete: err (post_id={post_id})")
            raise InfrastructureError("Failed to delete post", code="post_delete_failed") from exc

        logger.info(f"post.delete: ok (user_id={current_identity().user_id}, post_id={post_id})")
        return jsonify({"message": "Post deleted successfully"})
