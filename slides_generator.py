"""
Google Slides Generator

Builds a presentation from a Drive template in one straight pass:
authorize, clone the template, upload the product image, fill the
placeholders, export the result as PDF.

Nothing is retried or rolled back. If a later step fails, the cloned
presentation and uploaded image stay in Drive.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from googleapiclient.discovery import build

from authenticator import Authenticator
from config import DeckConfig
from content_replacer import ContentReplacer
from image_uploader import ImageUploader
from pdf_exporter import PdfExporter
from presentation_cloner import PresentationCloner

logger = logging.getLogger(__name__)

PRESENTATION_URL_TEMPLATE = "https://docs.google.com/presentation/d/{presentation_id}/edit"


@dataclass
class DeckResult:
    presentation_id: str
    image_url: str
    pdf_path: Path

    @property
    def presentation_url(self) -> str:
        return PRESENTATION_URL_TEMPLATE.format(presentation_id=self.presentation_id)


class SlidesGenerator:
    """
    Generates a filled-in copy of a template presentation.

    Service clients can be injected; otherwise they are built from the
    credentials returned by the authenticator.
    """

    def __init__(
        self,
        config: DeckConfig,
        authenticator: Optional[Authenticator] = None,
        credentials=None,
        drive_service=None,
        slides_service=None,
    ):
        self.config = config
        self.authenticator = authenticator or Authenticator(config)
        self.credentials = credentials
        self.drive_service = drive_service
        self.slides_service = slides_service

    def _ensure_services(self) -> None:
        if self.credentials is None:
            self.credentials = self.authenticator.authorize()
        if self.drive_service is None:
            self.drive_service = build('drive', 'v3', credentials=self.credentials, cache_discovery=False)
        if self.slides_service is None:
            self.slides_service = build('slides', 'v1', credentials=self.credentials, cache_discovery=False)
        logger.info(f"✅ Google API clients initialized ({self.config.application_name})")

    def generate(self) -> DeckResult:
        self._ensure_services()

        presentation_id = PresentationCloner(self.drive_service, self.config).clone(self.config.copy_name)
        image_url = ImageUploader(self.drive_service, self.credentials).upload(self.config.image_path)

        ContentReplacer(self.slides_service, self.config).replace_content(presentation_id, image_url)
        pdf_path = PdfExporter(self.drive_service, self.config).export(presentation_id)

        result = DeckResult(presentation_id=presentation_id, image_url=image_url, pdf_path=pdf_path)
        logger.info(f"🎉 Deck ready: {result.presentation_url}")
        return result
