"""
Lookup service for the mydict dictionary client.
"""

import logging
from pprint import pformat
from typing import Any, Dict, Optional

import requests

from .config import RESPONSE_TYPE
from .models import WordRecord, parse_word_record
from .utils import AppConfig


class LookupFailedError(Exception):
    """Raised when the dictionary API cannot be reached or returns garbage."""

    def __init__(self, word: str, reason: str):
        self.word = word
        self.reason = reason
        super().__init__(f"Lookup for '{word}' failed: {reason}")


class LookupService:
    """Handles word lookups against the dictionary API."""

    def __init__(self, config: AppConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session if session is not None else requests.Session()

    def _build_params(self, word: str) -> Dict[str, str]:
        return {
            'key': self.config.api_key,
            'type': RESPONSE_TYPE,
            'w': word,
        }

    def search(self, word: str) -> Any:
        """Fetch the raw JSON payload for a word.

        Args:
            word: English or Chinese word to look up

        Returns:
            The decoded JSON body

        Raises:
            ValueError: If the word is blank
            LookupFailedError: On network, HTTP or JSON decoding errors
        """
        if not word or not word.strip():
            raise ValueError("Word to look up cannot be empty")

        logging.info(f"Looking up '{word}' at {self.config.api_url}")
        try:
            response = self.session.get(
                self.config.api_url,
                params=self._build_params(word),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logging.warning(f"Request for '{word}' failed: {e}")
            raise LookupFailedError(word, str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            logging.warning(f"Response for '{word}' is not valid JSON: {e}")
            raise LookupFailedError(word, "invalid JSON in response") from e

        if self.config.debug:
            logging.debug(f"Response for '{word}':\n{pformat(data)}")
        return data

    def lookup(self, word: str) -> Optional[WordRecord]:
        """Look up a word and parse the result; None means nothing was found."""
        record = parse_word_record(self.search(word))
        if record is None:
            logging.info(f"No entry found for '{word}'")
        return record

    def close(self) -> None:
        self.session.close()
