from dupscan.detection.canonicalizer import canonicalize
from dupscan.detection.classifier import is_text_file
from dupscan.detection.encoding import normalize_encoding
from dupscan.detection.fingerprint import fingerprint
from dupscan.logging.logger import Log
from dupscan.processor.exceptions import FileSkippedError
from dupscan.processor.pipeline import PipelineContext, PipelineStep


class CheckDeclaredSizeStep(PipelineStep):
    def __init__(self, max_size_bytes: int) -> None:
        self._max_size_bytes = max_size_bytes

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.file.size > self._max_size_bytes:
            Log.info(f"Skipping large file: {context.file.name} ({context.file.size} bytes)")
            raise FileSkippedError(f"{context.file.name} exceeds {self._max_size_bytes} bytes")
        return context


class DecodeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.text = normalize_encoding(context.file.read_content())
        return context


class ClassifyStep(PipelineStep):
    def __init__(self, threshold: float) -> None:
        self._threshold = threshold

    def run(self, context: PipelineContext) -> PipelineContext:
        if not is_text_file(context.file.name, context.text, self._threshold):
            Log.debug(f"Skipping non-text file: {context.file.name}")
            raise FileSkippedError(f"{context.file.name} is not a text file")
        return context


class CheckContentLengthStep(PipelineStep):
    def __init__(self, max_length: int) -> None:
        self._max_length = max_length

    def run(self, context: PipelineContext) -> PipelineContext:
        if len(context.text) > self._max_length:
            Log.info(f"Skipping file with large content: {context.file.name}")
            raise FileSkippedError(
                f"{context.file.name} decodes to more than {self._max_length} characters"
            )
        return context


class CanonicalizeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.normalized_text = canonicalize(context.text)
        return context


class FingerprintStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.hash = fingerprint(context.normalized_text)
        return context
