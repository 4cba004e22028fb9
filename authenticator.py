"""
OAuth 2.0 authorization for the Drive and Slides APIs.

The cached-token versus first-run fork is resolved up front into one of two
outcomes, ``CachedCredential`` or ``InteractiveFlow``, before any remote call
is made. Tokens are persisted as authorized-user JSON so later runs can
refresh without operator involvement.
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from config import AUTH_MODE_LOCAL_SERVER, DeckConfig
from exceptions import AuthorizationError
from file_utils import write_text

logger = logging.getLogger(__name__)

# Out-of-band redirect: Google shows the verification code for copy/paste.
OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"


def expand_home(path: str) -> str:
    """Expand the ``~`` alias using HOME, or HOMEDRIVE + HOMEPATH on Windows."""
    home = os.getenv("HOME")
    if not home:
        home = os.getenv("HOMEDRIVE", "") + os.getenv("HOMEPATH", "")
    return path.replace("~", os.path.realpath(home))


@dataclass
class CachedCredential:
    """Credentials loaded from the token cache; may still need a refresh."""
    credentials: Credentials


@dataclass
class InteractiveFlow:
    """First-run authorization waiting for the operator."""
    flow: InstalledAppFlow
    authorization_url: str


AuthorizationOutcome = Union[CachedCredential, InteractiveFlow]


class Authenticator:
    """Returns valid bearer credentials, prompting the operator only when required."""

    def __init__(
        self,
        config: DeckConfig,
        prompt: Callable[[str], str] = input,
        interactive: Optional[bool] = None,
    ):
        """
        Args:
            config: Run configuration (client secret, token cache path, scopes)
            prompt: Reads the verification code from the operator
            interactive: Whether a terminal is attached. Defaults to ``sys.stdin.isatty()``.
        """
        self.config = config
        self.prompt = prompt
        self.interactive = interactive
        self.credentials_path = Path(expand_home(config.credentials_path))

    def authorize(self) -> Credentials:
        outcome = self.resolve()
        if isinstance(outcome, CachedCredential):
            creds = outcome.credentials
            if creds.expired:
                self._refresh(creds)
            return creds
        return self._complete_interactive(outcome)

    def resolve(self) -> AuthorizationOutcome:
        creds = self._load_cached()
        if creds is not None:
            return CachedCredential(creds)

        flow = self._build_flow()
        authorization_url, _ = flow.authorization_url(
            access_type="offline", prompt="consent"
        )
        return InteractiveFlow(flow=flow, authorization_url=authorization_url)

    def _load_cached(self) -> Optional[Credentials]:
        if not self.credentials_path.exists():
            return None

        try:
            creds = Credentials.from_authorized_user_file(
                str(self.credentials_path), self.config.scopes
            )
        except ValueError as e:
            logger.warning(f"⚠️ Could not parse token file {self.credentials_path}: {e}")
            return None

        logger.debug(f"✅ Loaded OAuth token from {self.credentials_path}")
        if creds.expired and not creds.refresh_token:
            logger.warning("⚠️ Cached token expired and has no refresh token, requesting new authorization")
            return None
        return creds

    def _refresh(self, creds: Credentials) -> None:
        creds.refresh(Request())
        logger.info("✅ Refreshed OAuth token")
        self._save(creds)

    def _build_flow(self) -> InstalledAppFlow:
        redirect_uri = None if self.config.auth_mode == AUTH_MODE_LOCAL_SERVER else OOB_REDIRECT_URI
        return InstalledAppFlow.from_client_secrets_file(
            self.config.client_secret_path,
            scopes=self.config.scopes,
            redirect_uri=redirect_uri,
        )

    def _complete_interactive(self, outcome: InteractiveFlow) -> Credentials:
        if self.config.auth_mode == AUTH_MODE_LOCAL_SERVER:
            creds = outcome.flow.run_local_server(
                port=0, access_type="offline", prompt="consent"
            )
            logger.info("✅ OAuth authorization completed via local server")
        else:
            creds = self._exchange_console_code(outcome)

        self._save(creds)
        print(f"Credentials saved to {self.credentials_path}")
        return creds

    def _exchange_console_code(self, outcome: InteractiveFlow) -> Credentials:
        interactive = self.interactive if self.interactive is not None else sys.stdin.isatty()
        if not interactive:
            raise AuthorizationError(
                "This application must be run on the command line: "
                "interactive authorization needs a terminal to read the verification code."
            )

        print(f"Open the following link in your browser:\n{outcome.authorization_url}")
        auth_code = self.prompt("Enter verification code: ").strip()

        try:
            outcome.flow.fetch_token(code=auth_code)
        except OAuth2Error as e:
            raise AuthorizationError(
                f"Wrong verification code ({e.error} - {e.description})"
            ) from e

        logger.info("✅ OAuth authorization completed")
        return outcome.flow.credentials

    def _save(self, creds: Credentials) -> None:
        parent = self.credentials_path.parent
        if not parent.exists():
            parent.mkdir(mode=0o700, parents=True)
        write_text(self.credentials_path, creds.to_json())
        logger.info(f"💾 Saved OAuth token to {self.credentials_path}")
