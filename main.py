#!/usr/bin/env python3
"""
mydict2 - translate between English and Chinese

This script looks up a word (English or Chinese) with the iciba dictionary API
and prints its pronunciations and meanings to the terminal.
It will only function with a valid iciba API key.

Usage:
    python main.py [options] <word>

Examples:
    python main.py hello              # Translate an English word
    python main.py 你好               # Translate a Chinese word
    python main.py -i                 # Enter interactive mode, one word per line
    python main.py -d hello           # Also dump the raw API response

Configuration:
    The API key is read from API_KEY in ~/.mydict/.env or a .env file
    in the current directory.
"""

if __name__ == '__main__':
    from mydict.cli import main
    main()
