from __future__ import annotations

from pathlib import Path

import pytest

from valuediff.decode import detect_format, from_json, from_yaml, load_document
from valuediff.errors import ERROR_CODE_DECODE_MALFORMED, ERROR_CODE_DECODE_UNSUPPORTED_FORMAT, DecodeError


def test_from_json_decodes_documents() -> None:
    assert from_json('{"v": [1, 2]}') == {"v": [1, 2]}


def test_from_json_rejects_malformed_text() -> None:
    with pytest.raises(DecodeError) as excinfo:
        from_json('{"v": ')
    assert excinfo.value.code == ERROR_CODE_DECODE_MALFORMED
    assert excinfo.value.details["line"] == 1


def test_from_yaml_decodes_documents() -> None:
    assert from_yaml("v:\n  - 1\n  - 2\n") == {"v": [1, 2]}


def test_from_yaml_rejects_malformed_text() -> None:
    with pytest.raises(DecodeError):
        from_yaml("v: [1, 2\n")


@pytest.mark.parametrize(
    ("name", "fmt", "expected"),
    [
        ("a.json", "auto", "json"),
        ("a.YAML", "auto", "yaml"),
        ("a.yml", "auto", "yaml"),
        ("a.txt", "json", "json"),
    ],
)
def test_detect_format(name: str, fmt: str, expected: str) -> None:
    assert detect_format(Path(name), fmt) == expected


def test_detect_format_rejects_unknown_inputs() -> None:
    with pytest.raises(DecodeError) as excinfo:
        detect_format(Path("a.txt"))
    assert excinfo.value.code == ERROR_CODE_DECODE_UNSUPPORTED_FORMAT

    with pytest.raises(DecodeError, match="Unsupported input format"):
        detect_format(Path("a.json"), "toml")


def test_load_document_reads_files(tmp_path: Path) -> None:
    json_path = tmp_path / "left.json"
    json_path.write_text('{"a": 1}', encoding="utf-8")
    yaml_path = tmp_path / "right.yaml"
    yaml_path.write_text("a: 1\n", encoding="utf-8")

    assert load_document(json_path) == load_document(yaml_path) == {"a": 1}


def test_load_document_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_bytes(b'{"a": "\xff"}')

    with pytest.raises(DecodeError, match="not valid UTF-8") as excinfo:
        load_document(path)
    assert excinfo.value.code == ERROR_CODE_DECODE_MALFORMED
    assert excinfo.value.details["position"] == 7
