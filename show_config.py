#!/usr/bin/env python3
"""
Show current mydict configuration from the .env files
"""

from mydict.utils import load_environment, show_config

if __name__ == "__main__":
    load_environment()
    show_config()
