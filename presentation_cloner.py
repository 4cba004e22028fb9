"""Locate the template presentation in Drive and copy it."""

import logging

from config import DeckConfig
from exceptions import AmbiguousTemplateError, TemplateNotFoundError

logger = logging.getLogger(__name__)

PRESENTATION_MIME_TYPE = 'application/vnd.google-apps.presentation'


def _quote_query_value(value: str) -> str:
    return value.replace('\\', '\\\\').replace("'", "\\'")


def template_query(template_name: str) -> str:
    """Drive ``files.list`` query matching a presentation by exact name."""
    return (
        f"mimeType='{PRESENTATION_MIME_TYPE}' "
        f"and name='{_quote_query_value(template_name)}' "
        f"and trashed=false"
    )


class PresentationCloner:
    def __init__(self, drive_service, config: DeckConfig):
        self.drive_service = drive_service
        self.config = config

    def find_template(self) -> str:
        """Return the id of the single presentation named like the configured template."""
        response = self.drive_service.files().list(
            q=template_query(self.config.template_name),
            spaces='drive',
            fields='files(id, name)',
        ).execute()

        files = response.get('files', [])
        if not files:
            raise TemplateNotFoundError(
                f"Template presentation not found: {self.config.template_name!r}"
            )
        if len(files) > 1:
            raise AmbiguousTemplateError(self.config.template_name, [f['id'] for f in files])

        template_id = files[0]['id']
        logger.debug(f"Found template {self.config.template_name!r}: {template_id}")
        return template_id

    def clone(self, copy_name: str) -> str:
        """Copy the template under ``copy_name`` and return the new presentation id."""
        template_id = self.find_template()
        file = self.drive_service.files().copy(
            fileId=template_id,
            body={'name': copy_name},
            fields='id',
        ).execute()

        presentation_id = file['id']
        logger.info(f"✅ Copied template to new presentation: {presentation_id}")
        return presentation_id
