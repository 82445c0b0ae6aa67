"""
mydict Package

A command-line dictionary client that translates between English and
Chinese using the iciba dictionary API.

Features:
- One-shot lookups from the command line
- Interactive mode reading one word per line
- Coloured terminal output for English and Chinese entries
- API key configuration through ~/.mydict/.env or a local .env file
"""

from .cli import main, MyDict
from .config import APP_VERSION
from .lookup_service import LookupService, LookupFailedError
from .renderer import Renderer
from .models import (
    WordKind,
    WordRecord,
    EnglishWordRecord,
    ChineseWordRecord,
    classify_headword,
    parse_word_record
)
from .utils import AppConfig, load_config, get_api_key

__version__ = APP_VERSION

__all__ = [
    # Main entry points
    "main",
    "MyDict",

    # Core services
    "LookupService",
    "LookupFailedError",
    "Renderer",

    # Records
    "WordKind",
    "WordRecord",
    "EnglishWordRecord",
    "ChineseWordRecord",
    "classify_headword",
    "parse_word_record",

    # Configuration
    "AppConfig",
    "load_config",
    "get_api_key"
]
