"""
Image upload to Google Drive.

The uploaded file is not shared; Slides fetches it through a direct-download
URL that carries the caller's access token, so the URL is only usable while
that token is valid.
"""

import logging
import os
from typing import Optional

from googleapiclient.http import MediaFileUpload
from PIL import Image, UnidentifiedImageError

from exceptions import ImageTypeError

logger = logging.getLogger(__name__)

DRIVE_FILES_ENDPOINT = 'https://www.googleapis.com/drive/v3/files'


def detect_image_mime_type(image_path: str) -> str:
    """Detect the MIME type from the file content, ignoring the extension."""
    try:
        with Image.open(image_path) as image:
            image_format = image.format
    except UnidentifiedImageError as e:
        raise ImageTypeError(f"Unrecognised image content: {image_path}") from e

    mime_type = Image.MIME.get(image_format)
    if not mime_type:
        raise ImageTypeError(f"No MIME type known for {image_format} image: {image_path}")
    return mime_type


def authenticated_download_url(file_id: str, access_token: str) -> str:
    return f"{DRIVE_FILES_ENDPOINT}/{file_id}?alt=media&access_token={access_token}"


class ImageUploader:
    def __init__(self, drive_service, credentials):
        self.drive_service = drive_service
        self.credentials = credentials

    def upload(self, image_path: str, name: Optional[str] = None) -> str:
        """Upload ``image_path`` as a new Drive file and return a temporary download URL."""
        mime_type = detect_image_mime_type(image_path)
        file_metadata = {
            'name': name or os.path.basename(image_path),
            'mimeType': mime_type,
        }
        media = MediaFileUpload(image_path, mimetype=mime_type, resumable=False)

        try:
            file = self.drive_service.files().create(
                body=file_metadata,
                media_body=media,
                fields='id',
            ).execute()
        finally:
            media.stream().close()

        file_id = file['id']
        logger.info(f"✅ Uploaded image to Drive: {file_id} ({mime_type})")
        return authenticated_download_url(file_id, self.credentials.token)
