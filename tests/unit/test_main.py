import json
from pathlib import Path
from unittest.mock import patch

import pytest

from dupscan.config.settings import Settings
from dupscan.main import main, scan


def _write(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


class TestScan:
    def test_prints_camel_case_result(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        root = tmp_path / "project"
        _write(root / "a.txt", b"Hello World\n")
        _write(root / "nested" / "b.txt", b"hello   world")
        _write(root / "c.txt", b"different")

        exit_code = scan(Settings(), root)

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["totalFiles"] == 3
        assert payload["duplicateCount"] == 2
        group = payload["duplicateGroups"][0]
        assert group["count"] == 2
        assert [f["path"] for f in group["files"]] == ["project/a.txt", "project/nested/b.txt"]
        assert all(f["isFromFolder"] for f in group["files"])
        assert payload["uniqueFiles"][0]["normalizedContent"] == "different"

    def test_empty_directory_exits_with_2(self, tmp_path: Path) -> None:
        assert scan(Settings(), tmp_path) == 2

    def test_missing_directory_exits_with_2(self, tmp_path: Path) -> None:
        assert scan(Settings(), tmp_path / "missing") == 2


class TestMain:
    def test_dispatches_scan(self, tmp_path: Path) -> None:
        with (
            patch("dupscan.main.Log"),
            patch("dupscan.main.scan", return_value=0) as mock_scan,
        ):
            assert main(["scan", str(tmp_path)]) == 0

        assert mock_scan.call_args.args[1] == tmp_path

    def test_serves_by_default(self) -> None:
        with patch("dupscan.main.Log"), patch("dupscan.main.serve") as mock_serve:
            assert main([]) == 0

        mock_serve.assert_called_once()

    def test_serve_passes_host_and_port(self) -> None:
        with patch("dupscan.main.Log"), patch("dupscan.main.serve") as mock_serve:
            main(["serve", "--host", "127.0.0.1", "--port", "9000"])

        _settings, host, port = mock_serve.call_args.args
        assert (host, port) == ("127.0.0.1", 9000)
