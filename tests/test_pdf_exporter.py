from unittest.mock import MagicMock

import pytest

import pdf_exporter
from pdf_exporter import PDF_MIME_TYPE, PdfExporter


class FakeDownload:
    """Writes a canned PDF in two chunks."""

    def __init__(self, fd, request):
        self.fd = fd
        self.chunks = [b"%PDF-1.4\n", b"%%EOF\n"]

    def next_chunk(self):
        self.fd.write(self.chunks.pop(0))
        return None, not self.chunks


@pytest.fixture(autouse=True)
def fake_download(monkeypatch):
    monkeypatch.setattr(pdf_exporter, "MediaIoBaseDownload", FakeDownload)


def test_export_writes_pdf_to_configured_path(deck_config):
    drive = MagicMock()

    path = PdfExporter(drive, deck_config).export("pres-1")

    assert str(path) == deck_config.output_pdf_path
    assert path.read_bytes() == b"%PDF-1.4\n%%EOF\n"
    drive.files.return_value.export_media.assert_called_once_with(
        fileId="pres-1", mimeType=PDF_MIME_TYPE
    )


def test_export_overwrites_existing_file(deck_config, tmp_path):
    target = tmp_path / "pdf" / "result.pdf"
    target.parent.mkdir()
    target.write_bytes(b"stale content that is much longer than the new pdf")

    PdfExporter(MagicMock(), deck_config).export("pres-1")

    assert target.read_bytes() == b"%PDF-1.4\n%%EOF\n"


def test_unwritable_output_path_raises(deck_config, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file where a directory should be")
    config = deck_config.with_overrides(output_pdf_path=str(blocker / "result.pdf"))

    with pytest.raises(OSError):
        PdfExporter(MagicMock(), config).export("pres-1")

    assert blocker.read_text() == "a file where a directory should be"


class InterruptedDownload:
    """Writes part of the PDF, then fails like a dropped Drive connection."""

    def __init__(self, fd, request):
        self.fd = fd

    def next_chunk(self):
        self.fd.write(b"%PDF-partial")
        raise ConnectionResetError("export interrupted")


def test_failed_download_keeps_previous_pdf(deck_config, tmp_path, monkeypatch):
    monkeypatch.setattr(pdf_exporter, "MediaIoBaseDownload", InterruptedDownload)
    target = tmp_path / "pdf" / "result.pdf"
    target.parent.mkdir()
    target.write_bytes(b"%PDF-previous-good")

    with pytest.raises(ConnectionResetError):
        PdfExporter(MagicMock(), deck_config).export("pres-1")

    assert target.read_bytes() == b"%PDF-previous-good"
    assert [p.name for p in target.parent.iterdir()] == ["result.pdf"]
