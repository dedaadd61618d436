import pytest

from dupscan.processor.exceptions import FileSkippedError
from dupscan.processor.models import InputFile
from dupscan.processor.pipeline import PipelineContext
from dupscan.processor.steps import (
    CanonicalizeStep,
    CheckContentLengthStep,
    CheckDeclaredSizeStep,
    ClassifyStep,
    DecodeStep,
    FingerprintStep,
)


def _make_context(
    name: str = "a.txt",
    content: bytes = b"Hello",
    size: int | None = None,
) -> PipelineContext:
    file = InputFile(
        name=name,
        size=len(content) if size is None else size,
        type="text/plain",
        read_content=lambda: content,
        last_modified=0,
    )
    return PipelineContext(file=file, path=name)


class TestCheckDeclaredSizeStep:
    def test_passes_within_limit(self) -> None:
        context = _make_context(size=10)
        assert CheckDeclaredSizeStep(10).run(context) is context

    def test_raises_above_limit(self) -> None:
        with pytest.raises(FileSkippedError, match="a.txt"):
            CheckDeclaredSizeStep(10).run(_make_context(size=11))


class TestDecodeStep:
    def test_sets_text(self) -> None:
        context = DecodeStep().run(_make_context(content=b"caf\xe9"))
        assert context.text == "café"


class TestClassifyStep:
    def test_rejects_binary(self) -> None:
        context = DecodeStep().run(_make_context(name="blob.bin", content=b"\x00\x01\x02a"))
        with pytest.raises(FileSkippedError, match="not a text file"):
            ClassifyStep(0.1).run(context)

    def test_accepts_text_extension(self) -> None:
        context = DecodeStep().run(_make_context(name="blob.json", content=b"\x00\x01\x02a"))
        assert ClassifyStep(0.1).run(context) is context


class TestCheckContentLengthStep:
    def test_raises_above_limit(self) -> None:
        context = DecodeStep().run(_make_context(content=b"abcdef"))
        with pytest.raises(FileSkippedError):
            CheckContentLengthStep(5).run(context)


class TestCanonicalizeAndFingerprint:
    def test_fills_normalized_text_and_hash(self) -> None:
        context = DecodeStep().run(_make_context(content=b"Hello World\n"))
        context = CanonicalizeStep().run(context)
        context = FingerprintStep().run(context)
        assert context.normalized_text == "helloworld"
        assert len(context.hash) == 64
