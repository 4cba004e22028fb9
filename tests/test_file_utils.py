import os

import pytest

import file_utils
from file_utils import write_bytes, write_text


def test_write_text_replaces_existing_content(tmp_path):
    target = tmp_path / "token.json"
    target.write_text('{"token": "old-and-longer"}')

    write_text(target, '{"token": "new"}')

    assert target.read_text() == '{"token": "new"}'


def test_write_bytes_creates_file(tmp_path):
    target = tmp_path / "result.pdf"

    write_bytes(target, b"%PDF-1.4")

    assert target.read_bytes() == b"%PDF-1.4"


def test_failed_replace_keeps_original_and_removes_temp(tmp_path, monkeypatch):
    target = tmp_path / "token.json"
    target.write_text('{"token": "good"}')

    def failing_replace(src, dst):
        raise PermissionError("replace denied")

    monkeypatch.setattr(file_utils.os, "replace", failing_replace)

    with pytest.raises(PermissionError):
        write_text(target, '{"tok')

    assert target.read_text() == '{"token": "good"}'
    assert os.listdir(tmp_path) == ["token.json"]
