"""Asynchronous file import into a WizardSession."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Union

from .state import WizardSession

logger = logging.getLogger(__name__)


class ConfigFileImporter:
    """
    Reads user-selected JSON files into a session.

    Only the most recent request applies its result: if a second import starts
    while the first read is still pending, the first one is dropped when it
    finishes. Files that are not valid JSON are ignored without an error.
    """

    def __init__(self, session: WizardSession):
        self.session = session
        self._latest = 0

    async def import_file(self, path: Union[str, Path]) -> bool:
        """
        Read and import a configuration file.

        Args:
            path: File to read

        Returns:
            True if the session was reseeded, False if the file was not JSON
            or a newer import superseded this one

        Raises:
            OSError: If the file cannot be read and no newer import is pending
        """
        self._latest += 1
        ticket = self._latest

        try:
            text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
        except OSError:
            if ticket != self._latest:
                logger.debug("Discarding failed, superseded import of %s", path)
                return False
            raise

        if ticket != self._latest:
            logger.debug("Discarding superseded import of %s", path)
            return False

        return self._apply(text, str(path))

    def import_text(self, text: str) -> bool:
        """Import already-read JSON text; supersedes any pending file read."""
        self._latest += 1
        return self._apply(text, "<text>")

    def _apply(self, text: str, source: str) -> bool:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.debug("Ignoring %s, not valid JSON: %s", source, exc)
            return False

        self.session.import_config(raw)
        return True
