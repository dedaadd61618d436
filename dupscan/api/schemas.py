"""Response models for the HTTP API. Field names are camelCase on the wire."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ProcessedFileResponse(_ApiModel):
    name: str
    size: int
    type: str
    content: str
    normalized_content: str
    hash: str
    last_modified: int
    path: str
    is_from_folder: bool


class DuplicateGroupResponse(_ApiModel):
    hash: str
    files: list[ProcessedFileResponse]
    count: int


class ProcessingResultResponse(_ApiModel):
    duplicate_groups: list[DuplicateGroupResponse]
    unique_files: list[ProcessedFileResponse]
    total_files: int
    duplicate_count: int


class ErrorResponse(BaseModel):
    error: str
