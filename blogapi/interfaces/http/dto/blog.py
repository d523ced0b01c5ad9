from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class CreatePostDTO(BaseModel):
    title: str = Field(min_length=1, max_length=256)
    content: str


class UpdatePostDTO(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=256)
    content: str | None = None

    @model_validator(mode="after")
    def _require_a_field(self) -> "UpdatePostDTO":
        if self.title is None and self.content is None:
            raise ValueError("title or content is required")
        return self


class CreateCommentDTO(BaseModel):
    content: str = Field(min_length=1)
    post: int = Field(ge=1)


class UpdateCommentDTO(BaseModel):
    content: str = Field(min_length=1)


class CreatedDTO(BaseModel):
    message: str
    id: int
