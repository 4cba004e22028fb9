"""PDF export of a presentation through the Drive export endpoint."""

import io
import logging
from pathlib import Path

from googleapiclient.http import MediaIoBaseDownload

from config import DeckConfig
from file_utils import write_bytes

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = 'application/pdf'


class PdfExporter:
    def __init__(self, drive_service, config: DeckConfig):
        self.drive_service = drive_service
        self.config = config

    def export(self, presentation_id: str) -> Path:
        """Download the presentation as PDF to the configured path, overwriting it.

        The export is buffered in memory; the target file is only replaced once
        the download has completed.
        """
        pdf_path = Path(self.config.output_pdf_path)
        pdf_path.parent.mkdir(parents=True, exist_ok=True)

        request = self.drive_service.files().export_media(
            fileId=presentation_id,
            mimeType=PDF_MIME_TYPE,
        )
        buffer = io.BytesIO()
        downloader = MediaIoBaseDownload(buffer, request)
        done = False
        while not done:
            status, done = downloader.next_chunk()
            if status:
                logger.debug(f"Download progress: {int(status.progress() * 100)}%")

        write_bytes(pdf_path, buffer.getvalue())

        file_size = pdf_path.stat().st_size
        logger.info(f"✅ Exported PDF: {pdf_path} ({file_size / 1024:.1f} KB)")
        return pdf_path
