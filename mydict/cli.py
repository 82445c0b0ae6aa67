"""
Command-line interface for the mydict dictionary client.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import APP_NAME, APP_VERSION, BANNER, ENV_FILE, PROMPT
from .lookup_service import LookupFailedError, LookupService
from .renderer import Renderer
from .utils import AppConfig, env_debug_enabled, load_config, load_environment, show_config


def setup_logging(debug: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=BANNER + '\ntranslate between english and chinese',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Configuration:
  API_KEY is read from {ENV_FILE} or a .env file in the current directory.

Examples:
  {APP_NAME} hello
  {APP_NAME} 你好
  {APP_NAME} -i
        """
    )

    parser.add_argument('word', nargs='*',
                        help='Word to translate (several arguments are joined with spaces)')

    parser.add_argument('-i', '--interactive', dest='interactive', action='store_true',
                        help='Enter interactive mode')

    parser.add_argument('-d', '--debug', dest='debug', action='store_true',
                        help='Display debug info')

    parser.add_argument('-v', '--version', action='version', version=APP_VERSION,
                        help='Display version')

    parser.add_argument('--no-color', dest='no_color', action='store_true',
                        help='Disable coloured output')

    parser.add_argument('--show-config', dest='show_config', action='store_true',
                        help='Display the current configuration and exit')

    return parser


class MyDict:
    """Main application class for dictionary lookups."""

    def __init__(self, config: Optional[AppConfig] = None, debug: bool = False,
                 color: Optional[bool] = None, service: Optional[LookupService] = None,
                 renderer: Optional[Renderer] = None):
        """Initialize the client, loading configuration unless one is given."""
        if config is None:
            try:
                config = load_config(debug=debug, color=color)
            except ValueError as e:
                print(f"Configuration error: {e}")
                sys.exit(1)
        self.config = config
        self.service = service if service is not None else LookupService(config)
        self.renderer = renderer if renderer is not None else Renderer(color=config.color)

    def lookup_word(self, word: str) -> bool:
        """Look up a single word and render the result.

        Returns:
            False if the request failed, True otherwise (including not found)
        """
        try:
            record = self.service.lookup(word)
        except LookupFailedError as e:
            print(f"Error: {e.reason}")
            return False

        if record is None:
            print(f"No results for '{word}'.")
            return True

        self.renderer.render(record)
        return True

    def interactive(self) -> None:
        """Read words one line at a time until end of input."""
        print(self.renderer.style(BANNER, 'yellow', 'bold'))
        try:
            while True:
                try:
                    line = input(PROMPT)
                except EOFError:
                    print()
                    break

                word = line.strip()
                if not word:
                    continue
                self.lookup_word(word)
        except KeyboardInterrupt:
            print()

    def run(self, args: argparse.Namespace) -> int:
        """Run the client with parsed arguments and return the exit status."""
        word = " ".join(args.word).strip()
        status = 0

        if word:
            if not self.lookup_word(word):
                status = 1

        # A failed one-shot lookup still fails the run after an interactive session
        if args.interactive:
            self.interactive()

        return status

    def close(self) -> None:
        self.service.close()


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI application."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.debug)
    load_environment()
    if env_debug_enabled():
        logging.getLogger().setLevel(logging.DEBUG)

    if args.show_config:
        show_config()
        sys.exit(0)

    if not args.interactive and not " ".join(args.word).strip():
        parser.print_help()
        sys.exit(1)

    client = MyDict(debug=args.debug, color=False if args.no_color else None)
    try:
        status = client.run(args)
    finally:
        client.close()
    sys.exit(status)


if __name__ == '__main__':
    main()
