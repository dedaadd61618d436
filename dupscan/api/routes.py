"""
Duplicate analysis API routes.

POST /api/process-files accepts a multipart batch:
- files: one part per uploaded file
- paths: relative path per file, parallel to files (optional)
- lastModified: client timestamp in ms per file, parallel to files (optional)
"""

import os
import time

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse

from dupscan.api.dependencies import get_processor
from dupscan.api.schemas import ErrorResponse, ProcessingResultResponse
from dupscan.logging.logger import Log
from dupscan.processor.exceptions import EmptyBatchError
from dupscan.processor.models import InputFile
from dupscan.processor.processor import Processor

router = APIRouter(prefix="/api", tags=["duplicates"])


def _declared_size(upload: UploadFile) -> int:
    if upload.size is not None:
        return upload.size
    upload.file.seek(0, os.SEEK_END)
    size = upload.file.tell()
    upload.file.seek(0)
    return size


def _to_input_file(upload: UploadFile, last_modified: int) -> InputFile:
    """Wrap an upload without reading it; the bytes are pulled inside the batch."""
    return InputFile(
        name=upload.filename or "",
        size=_declared_size(upload),
        type=upload.content_type or "",
        read_content=upload.file.read,
        last_modified=last_modified,
    )


def _timestamp_at(timestamps: list[int] | None, index: int, default: int) -> int:
    if timestamps is not None and index < len(timestamps):
        return timestamps[index]
    return default


@router.post(
    "/process-files",
    response_model=ProcessingResultResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def process_files(
    files: list[UploadFile] | None = File(default=None),
    paths: list[str] | None = Form(default=None),
    last_modified: list[int] | None = Form(default=None, alias="lastModified"),
    processor: Processor = Depends(get_processor),
):
    """
    Find duplicate text files in an uploaded batch.

    - Oversized, binary and unreadable files are left out without error
    - Returns duplicate groups (largest first) and the unique files
    """
    try:
        received_at = int(time.time() * 1000)
        inputs = [
            _to_input_file(upload, _timestamp_at(last_modified, index, received_at))
            for index, upload in enumerate(files or [])
        ]
        result = processor.process(inputs, paths)
        response = ProcessingResultResponse.model_validate(result)
    except EmptyBatchError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "No files provided"},
        )
    except Exception:
        Log.error("Error processing files", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    return response
