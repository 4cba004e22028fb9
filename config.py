"""
Deck Generator Configuration

One explicit configuration object handed to every workflow component. Defaults
reproduce the stock Espeo template run; each field can be overridden through a
``DECK_*`` environment variable (``.env`` files are honoured) or CLI flags.
"""

import os
from dataclasses import dataclass, field, replace
from typing import List

from dotenv import load_dotenv

load_dotenv()


SLIDES_SCOPE_PRESENTATIONS = "https://www.googleapis.com/auth/presentations"
SLIDES_SCOPE_DRIVE = "https://www.googleapis.com/auth/drive"

AUTH_MODE_CONSOLE = "console"
AUTH_MODE_LOCAL_SERVER = "local_server"
AUTH_MODES = (AUTH_MODE_CONSOLE, AUTH_MODE_LOCAL_SERVER)

PRODUCT_NAME_PLACEHOLDER = "{{ product_name }}"
PRODUCT_DESCRIPTION_PLACEHOLDER = "{{ product_description }}"
IMAGE_PLACEHOLDER = "{{ image }}"


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class DeckConfig:
    """Names, paths and scopes for a single deck generation run."""

    application_name: str = "Espeo Google Slides Generator"
    client_secret_path: str = "client_secret.json"
    # If modifying the scopes, delete the previously saved credentials file.
    credentials_path: str = "~/.credentials/espeo.google-slide-api-tutorial.json"
    template_name: str = "Espeo template"
    copy_name: str = "copy_name"
    image_path: str = "./images/espeo.png"
    output_pdf_path: str = "./pdf/result.pdf"
    product_name: str = "Awesome name"
    product_description: str = "Some description"
    auth_mode: str = AUTH_MODE_CONSOLE
    scopes: List[str] = field(
        default_factory=lambda: [SLIDES_SCOPE_PRESENTATIONS, SLIDES_SCOPE_DRIVE]
    )

    def __post_init__(self) -> None:
        if self.auth_mode not in AUTH_MODES:
            raise ValueError(
                f"Unknown auth mode {self.auth_mode!r} (expected one of {', '.join(AUTH_MODES)})"
            )

    @classmethod
    def from_env(cls) -> "DeckConfig":
        defaults = cls()
        return cls(
            application_name=_env("DECK_APPLICATION_NAME", defaults.application_name),
            client_secret_path=_env("DECK_CLIENT_SECRET_PATH", defaults.client_secret_path),
            credentials_path=_env("DECK_CREDENTIALS_PATH", defaults.credentials_path),
            template_name=_env("DECK_TEMPLATE_NAME", defaults.template_name),
            copy_name=_env("DECK_COPY_NAME", defaults.copy_name),
            image_path=_env("DECK_IMAGE_PATH", defaults.image_path),
            output_pdf_path=_env("DECK_OUTPUT_PDF", defaults.output_pdf_path),
            product_name=_env("DECK_PRODUCT_NAME", defaults.product_name),
            product_description=_env("DECK_PRODUCT_DESCRIPTION", defaults.product_description),
            auth_mode=_env("DECK_AUTH_MODE", defaults.auth_mode).strip().lower(),
        )

    def with_overrides(self, **overrides) -> "DeckConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
