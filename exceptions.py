"""Error taxonomy for the deck generation workflow.

File system failures surface as plain ``OSError`` and Google API failures as
``googleapiclient.errors.HttpError``; neither is wrapped.
"""


class DeckError(Exception):
    """Base class for workflow errors raised by this package."""


class AuthorizationError(DeckError):
    """OAuth authorization could not be completed."""


class TemplateNotFoundError(DeckError):
    """No presentation in Drive carries the configured template name."""


class AmbiguousTemplateError(DeckError):
    """Several presentations share the configured template name."""

    def __init__(self, template_name: str, file_ids):
        self.template_name = template_name
        self.file_ids = list(file_ids)
        super().__init__(
            f"Template name {template_name!r} matches {len(self.file_ids)} presentations: "
            f"{', '.join(self.file_ids)}"
        )


class ImageTypeError(DeckError):
    """The image file content is not a format Pillow recognises."""
