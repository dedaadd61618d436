from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from dupscan.config.settings import Settings
from dupscan.logging.logger import Log
from dupscan.processor.exceptions import EmptyBatchError, FileSkippedError
from dupscan.processor.models import (
    DuplicateGroup,
    InputFile,
    ProcessedFile,
    ProcessingResult,
)
from dupscan.processor.pipeline import PipelineContext, PipelineStep
from dupscan.processor.steps import (
    CanonicalizeStep,
    CheckContentLengthStep,
    CheckDeclaredSizeStep,
    ClassifyStep,
    DecodeStep,
    FingerprintStep,
)


def is_from_folder(path: str, name: str) -> bool:
    """True when ``path`` looks like a folder-relative path rather than a bare name."""
    return "/" in path and path != name


class Processor:
    """Runs every file of a batch through the per-file pipeline and groups the results.

    Files are handled in fixed-size batches. Within a batch each file runs on its
    own worker thread; the batch is joined before the next one starts.
    """

    def __init__(self, steps: list[PipelineStep], batch_size: int = 50) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._steps = steps
        self._batch_size = batch_size

    def process(
        self,
        files: Sequence[InputFile],
        paths: Sequence[str] | None = None,
    ) -> ProcessingResult:
        """Fingerprint ``files`` and partition them into duplicates and uniques.

        Args:
            files: The uploaded batch.
            paths: Optional relative paths, parallel to ``files``. Missing or
                empty entries fall back to ``InputFile.path`` and then the name.

        Raises:
            EmptyBatchError: if ``files`` is empty.
        """
        if not files:
            raise EmptyBatchError("No files provided")

        Log.info(f"Processing {len(files)} files...")
        contexts = [
            PipelineContext(file=file, path=self._resolve_path(file, index, paths))
            for index, file in enumerate(files)
        ]

        processed: list[ProcessedFile] = []
        total_batches = -(-len(contexts) // self._batch_size)
        with ThreadPoolExecutor(
            max_workers=min(self._batch_size, len(contexts)),
            thread_name_prefix="dupscan",
        ) as executor:
            for batch_number, start in enumerate(
                range(0, len(contexts), self._batch_size), start=1
            ):
                Log.info(f"Processing batch {batch_number}/{total_batches}")
                batch = contexts[start:start + self._batch_size]
                for processed_file in executor.map(self._process_one, batch):
                    if processed_file is not None:
                        processed.append(processed_file)

        Log.info(f"Successfully processed {len(processed)} files")
        result = group_by_hash(processed)
        Log.info(
            f"Analysis complete: {len(result.duplicate_groups)} duplicate groups, "
            f"{len(result.unique_files)} unique files"
        )
        return result

    def _process_one(self, context: PipelineContext) -> ProcessedFile | None:
        try:
            for step in self._steps:
                context = step.run(context)
        except FileSkippedError:
            return None
        except Exception as exc:
            Log.error(f"Error processing file {context.file.name}: {exc}", exc_info=True)
            return None

        file = context.file
        return ProcessedFile(
            name=file.name,
            size=file.size,
            type=file.type,
            content=context.text,
            normalized_content=context.normalized_text,
            hash=context.hash,
            last_modified=file.last_modified,
            path=context.path,
            is_from_folder=is_from_folder(context.path, file.name),
        )

    @staticmethod
    def _resolve_path(
        file: InputFile,
        index: int,
        paths: Sequence[str] | None,
    ) -> str:
        if paths is not None and index < len(paths) and paths[index]:
            return paths[index]
        return file.path or file.name


def group_by_hash(files: list[ProcessedFile]) -> ProcessingResult:
    """Partition processed files by fingerprint.

    Groups of two or more become duplicate groups, sorted by descending count
    with ties kept in discovery order. Singletons become unique files.
    """
    by_hash: dict[str, list[ProcessedFile]] = {}
    for file in files:
        by_hash.setdefault(file.hash, []).append(file)

    duplicate_groups: list[DuplicateGroup] = []
    unique_files: list[ProcessedFile] = []
    for file_hash, members in by_hash.items():
        if len(members) > 1:
            duplicate_groups.append(
                DuplicateGroup(hash=file_hash, files=members, count=len(members))
            )
        else:
            unique_files.append(members[0])

    duplicate_groups.sort(key=lambda group: group.count, reverse=True)
    return ProcessingResult(
        duplicate_groups=duplicate_groups,
        unique_files=unique_files,
        total_files=len(files),
        duplicate_count=sum(group.count for group in duplicate_groups),
    )


def build_steps(settings: Settings) -> list[PipelineStep]:
    """Per-file pipeline in execution order."""
    return [
        CheckDeclaredSizeStep(settings.max_file_size_bytes),
        DecodeStep(),
        ClassifyStep(settings.non_printable_threshold),
        CheckContentLengthStep(settings.max_file_size_bytes),
        CanonicalizeStep(),
        FingerprintStep(),
    ]


def build_processor(settings: Settings) -> Processor:
    """Build a Processor wired from application settings."""
    return Processor(steps=build_steps(settings), batch_size=settings.batch_size)
