from abc import ABC, abstractmethod
from dataclasses import dataclass

from dupscan.processor.models import InputFile


@dataclass(slots=True)
class PipelineContext:
    """Per-file working state, private to the worker that owns it."""

    file: InputFile
    path: str
    text: str = ""
    normalized_text: str = ""
    hash: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
