from fastapi import Request

from dupscan.processor.processor import Processor


def get_processor(request: Request) -> Processor:
    """Processor built once per application; it holds no per-request state."""
    return request.app.state.processor
