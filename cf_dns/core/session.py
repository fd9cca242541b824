"""
Session state shared by the commands of one run.

A session lazily creates the API client and resolves the active zone the
first time a command needs them, reading credentials from the environment
and, in interactive mode, prompting for whatever is missing.
"""

import logging
import os
from typing import Callable, Dict, Mapping, Optional

from rich.console import Console

from ..providers.dns_client import DNSClient
from .exceptions import CredentialError

logger = logging.getLogger(__name__)

EMAIL_VAR = "CLOUDFLARE_EMAIL"
KEY_VAR = "CLOUDFLARE_KEY"
ZONE_VAR = "CLOUDFLARE_ZONE"


class Session:
    """API client and active zone for the lifetime of one run."""

    def __init__(
        self,
        config: Dict,
        interactive: bool = False,
        console: Optional[Console] = None,
        environ: Optional[Mapping[str, str]] = None,
        client_factory: Callable[..., DNSClient] = DNSClient,
    ):
        self.config = config
        self.interactive = interactive
        self.console = console or Console()
        self.environ = os.environ if environ is None else environ
        self.client_factory = client_factory
        self.api: Optional[DNSClient] = None
        self.zone_id: Optional[str] = None
        self.zone_name: Optional[str] = None

    def print(self, message: str = "", style: Optional[str] = None):
        """Print one line of command output."""
        self.console.print(
            message,
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def _read(self, prompt: str, hidden: bool = False) -> str:
        try:
            return self.console.input(prompt, password=hidden).strip()
        except EOFError:
            self.print()
            return ""

    def _credential(self, variable: str, prompt: str, hidden: bool = False) -> str:
        value = self.environ.get(variable, "")
        if not value and self.interactive:
            value = self._read(prompt, hidden=hidden)
        if not value:
            logger.debug(f"{variable} not available")
            raise CredentialError(variable)
        return value

    def get_api(self) -> DNSClient:
        """
        Return the API client, creating it on first use.

        Raises:
            CredentialError: Email or API key is missing and cannot be
                prompted for
        """
        if self.api is not None:
            return self.api

        email = self._credential(EMAIL_VAR, "Enter cloudflare account email: ")
        key = self._credential(KEY_VAR, "Enter cloudflare API key: ", hidden=True)

        self.api = self.client_factory(self.config, email=email, api_key=key)
        logger.info(f"API client created for {email}")
        return self.api

    def get_zone(self) -> str:
        """
        Return the active zone id, resolving the default zone on first use.

        Raises:
            CredentialError: No zone name is available
            ProviderError: The zone could not be resolved
        """
        if self.zone_id is not None:
            return self.zone_id

        api = self.get_api()
        zone_name = self._credential(ZONE_VAR, "Enter zone name: ")
        self.zone_id = api.zone_id_by_name(zone_name)
        self.zone_name = zone_name
        return self.zone_id

    def set_zone(self, zone_name: str) -> str:
        """Resolve ``zone_name`` and make it the active zone."""
        zone_id = self.get_api().zone_id_by_name(zone_name)
        self.zone_id = zone_id
        self.zone_name = zone_name
        logger.info(f"Active zone set to {zone_name} ({zone_id})")
        return zone_id

    def close(self):
        if self.api is not None:
            self.api.close()
