# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from blogapi.application.use_cases.blog.comments import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from blogapi.auth import auth_required, current_identity
from blogapi.interfaces.http.dto.blog import CreateCommentDTO, CreatedDTO, UpdateCommentDTO
from blogapi.shared.errors import InfrastructureError, StorageUnavailableError
from blogapi.shared.errors.validation import raise_validation_error
from blogapi.shared.logging import logger


class CommentsController:
    def __init__(
        self,
        *,
        list_use_case: ListCommentsUseCase,
        create_use_case: CreateCommentUseCase,
        update_use_case: UpdateCommentUseCase,
        delete_use_case: DeleteCommentUseCase,
    ) -> None:
        self._list = list_use_case
        self._create = create_use_case
        self._update = update_use_case
        self._delete = delete_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("comments", __name__)
        bp.add_url_rule("/comments", view_func=self.list_comments, methods=["GET"])
        bp.add_url_rule("/comments", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/comments/<int:comment_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/comments/<int:comment_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    @auth_required
    def list_comments(self):
        try:
            items = self._list.execute()
        except StorageUnavailableError as exc:
            logger.exception("comments.list: err")
            raise InfrastructureError(
                "Failed to retrieve comments", code="comments_list_failed"
            ) from exc
        logger.info(f"comments.list: ok (n={len(items)})")
        return jsonify([comment.to_dict() for comment in items])

    @auth_required
    def create(self):
        try:
            dto = CreateCommentDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            comment = self._create.execute(content=dto.content, post_id=dto.post)
        except StorageUnavailableError as exc:
            logger.exception(f"comment.create: err (post_id={dto.post})")
            raise InfrastructureError(
                "Failed to create comment", code="comment_create_failed"
            ) from exc

        logger.info(
            f"comment.create: ok (user_id={current_identity().user_id}, "
            f"comment_id={comment.id}, post_id={dto.post})"
        )
        payload = CreatedDTO(message="Comment created successfully", id=comment.id).model_dump()
        return jsonify(payload), HTTPStatus.CREATED

    @auth_required
    def update(self, comment_id: int):
        try:
            dto = UpdateCommentDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            self._update.execute(comment_id, content=dto.content)
        except StorageUnavailableError as exc:
            logger.exception(f"comment.update: err (comment_id={comment_id})")
            raise InfrastructureError(
                "Failed to update comment", code="comment_update_failed"
            ) from exc

        logger.info(f"comment.update: ok (comment_id={comment_id})")
        return jsonify({"message": "Comment updated successfully"})

    @auth_required
    def delete(self, comment_id: int):
        try:
            self._delete.execute(comment_id)
        except StorageUnavailableError as exc:
            logger.exception(f"comment.delete: err (comment_id={comment_id})")
            raise InfrastructureError(
                "Failed to delete comment", code="comment_delete_failed"
            ) from exc

        logger.info(f"comment.delete: ok (comment_id={comment_id})")
        return jsonify({"message": "Comment deleted successfully"})
