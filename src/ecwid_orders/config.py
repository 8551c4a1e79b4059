"""Client configuration loaded from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_API_URL, DEFAULT_LEGACY_API_URL, DEFAULT_TIMEOUT


@dataclass(frozen=True)
class EcwidSettings:
    """Credentials and endpoints for one Ecwid store."""

    store_id: str
    token: str
    base_url: str = DEFAULT_API_URL
    legacy_base_url: str = DEFAULT_LEGACY_API_URL
    timeout: int = DEFAULT_TIMEOUT

    @property
    def store_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.store_id}"

    @property
    def legacy_store_url(self) -> str:
        return f"{self.legacy_base_url.rstrip('/')}/{self.store_id}"

    @classmethod
    def from_env(cls) -> "EcwidSettings":
        """Build settings from environment variables (and a .env file if present).

        Reads ECWID_STORE_ID, ECWID_TOKEN and optionally ECWID_API_URL,
        ECWID_LEGACY_API_URL and ECWID_TIMEOUT.

        Raises:
            ValueError: If the store id or token is missing, or the timeout is not an integer
        """
        load_dotenv()

        store_id = os.getenv("ECWID_STORE_ID")
        token = os.getenv("ECWID_TOKEN")

        if not all([store_id, token]):
            raise ValueError(
                "Missing required Ecwid credentials. Please set ECWID_STORE_ID and ECWID_TOKEN environment variables."
            )

        timeout = os.getenv("ECWID_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout_seconds = int(timeout)
        except ValueError:
            raise ValueError(f"ECWID_TIMEOUT must be an integer number of seconds, got {timeout!r}") from None

        return cls(
            store_id=str(store_id),
            token=str(token),
            base_url=os.getenv("ECWID_API_URL", DEFAULT_API_URL),
            legacy_base_url=os.getenv("ECWID_LEGACY_API_URL", DEFAULT_LEGACY_API_URL),
            timeout=timeout_seconds,
        )
