import argparse
import json
import sys
from pathlib import Path

import uvicorn

from dupscan.api.app import create_app
from dupscan.api.schemas import ProcessingResultResponse
from dupscan.config.settings import Settings
from dupscan.logging.logger import Log
from dupscan.processor.exceptions import EmptyBatchError
from dupscan.processor.file_loader import FileLoader
from dupscan.processor.processor import build_processor


def serve(settings: Settings, host: str | None = None, port: int | None = None) -> None:
    """Run the HTTP API under uvicorn."""
    uvicorn.run(
        create_app(settings),
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
    )


def scan(settings: Settings, directory: Path) -> int:
    """Analyse a local directory and print the result as JSON. Returns the exit code."""
    try:
        files = FileLoader(directory).load()
        result = build_processor(settings).process(files)
    except (NotADirectoryError, EmptyBatchError) as exc:
        Log.error(str(exc))
        return 2

    payload = ProcessingResultResponse.model_validate(result).model_dump(by_alias=True)
    json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dupscan",
        description="Find duplicate text files by canonical content fingerprint.",
    )
    commands = parser.add_subparsers(dest="command")

    serve_parser = commands.add_parser("serve", help="Run the HTTP API (default)")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)

    scan_parser = commands.add_parser("scan", help="Analyse a local directory")
    scan_parser.add_argument("directory", type=Path)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> dispatch command."""
    args = _build_parser().parse_args(argv)
    settings = Settings()

    if args.command == "scan":
        # stdout carries the JSON result
        Log.configure(settings.log_level, stream=sys.stderr)
        return scan(settings, args.directory)

    Log.configure(settings.log_level)
    serve(settings, getattr(args, "host", None), getattr(args, "port", None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
