"""
Configuration constants for the mydict dictionary client.
"""

import os
from typing import Dict

# Application metadata
APP_NAME: str = "mydict2"
APP_VERSION: str = "0.1.0"

# API configuration
API_URL: str = "http://dict-co.iciba.com/api/dictionary.php"
RESPONSE_TYPE: str = "json"

# Environment variable names
API_KEY_VAR: str = "API_KEY"
API_URL_VAR: str = "API_URL"
DEBUG_VAR: str = "DEBUG"
TIMEOUT_VAR: str = "MYDICT_TIMEOUT"
NO_COLOR_VAR: str = "NO_COLOR"

# Per-user env file, loaded before the working directory's .env
ENV_FILE: str = os.path.join(os.path.expanduser("~"), ".mydict", ".env")

# Interactive prompt
PROMPT: str = "> "

BANNER: str = r"""
                 ___     __    ___
  __ _  __ _____/ (_)___/ /_  |_  |
 /  '  / // / _  / / __/ __/ / __/
/_/_/_/ _, / _,_/_/ __/ __/ /____/
      /___/
"""

# ANSI escape sequences used by the renderer
ANSI_STYLES: Dict[str, str] = {
    'bold': '\033[1m',
    'italic': '\033[3m',
    'underline': '\033[4m',
    'magenta': '\033[35m',
    'yellow': '\033[33m',
    'blue': '\033[34m',
    'green': '\033[32m',
    'cyan': '\033[36m',
    'reset': '\033[0m',
}

# Separator used when joining spelling and gloss lists
LIST_SEPARATOR: str = ","

# Bullet printed before each English part-of-speech line
PART_BULLET: str = "◆"
