#!/usr/bin/env python3
"""Book Explorer CLI - search Google Books, sort, filter and inspect results."""
import argparse
import asyncio
import shlex
import sys
import logging

from booksearch.async_client import AsyncGoogleBooksClient
from booksearch.client import GoogleBooksClient
from booksearch.config import Config
from booksearch.models import SearchType
from booksearch.render import make_renderer, RENDERERS
from booksearch.search import SearchOrchestrator
from booksearch.state import BookExplorer

logger = logging.getLogger(__name__)

INTERACTIVE_HELP = """Commands:
  search <title|isbn|author> <query>   Search Google Books
  sort                                 Sort results by rating (highest first)
  filter on|off                        Show only e-books
  show <n>                             Show details for book n
  list                                 Show the result list again
  help                                 Show this help
  quit                                 Exit"""


def setup_logging(config: Config, verbose: bool = False):
    """Configure root logging for the CLI."""
    logging.basicConfig(
        level=logging.INFO if verbose else config.LOG_LEVEL,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def open_client(args, config: Config):
    """Sync or async Google Books client, usable as a context manager."""
    if args.use_async:
        return AsyncGoogleBooksClient(
            api_key=config.GOOGLE_BOOKS_API_KEY,
            timeout=config.DEFAULT_TIMEOUT,
            base_url=config.GOOGLE_BOOKS_API_URL
        )
    return GoogleBooksClient(
        api_key=config.GOOGLE_BOOKS_API_KEY,
        timeout=config.DEFAULT_TIMEOUT,
        base_url=config.GOOGLE_BOOKS_API_URL
    )


async def with_explorer(args, config: Config, action):
    """Build an explorer around a fresh client and run ``action`` with it."""
    renderer = make_renderer(args.format)
    client = open_client(args, config)

    if args.use_async:
        async with client:
            explorer = BookExplorer(SearchOrchestrator(client, config.MAX_RESULTS), renderer)
            return await action(explorer)

    with client:
        explorer = BookExplorer(SearchOrchestrator(client, config.MAX_RESULTS), renderer)
        return await action(explorer)


async def search_once(args, config: Config) -> int:
    """Run a single search, optionally sorting, filtering and selecting."""

    async def action(explorer: BookExplorer) -> int:
        if not await explorer.handle_search(args.query, SearchType.from_label(args.type)):
            return 2
        if args.sort:
            explorer.handle_sort()
        if args.ebook_only:
            explorer.handle_filter(True)
        if args.select is not None:
            try:
                explorer.handle_select_index(args.select)
            except IndexError as e:
                logger.error(str(e))
                return 1
        return 0

    return await with_explorer(args, config, action)


async def dispatch(explorer: BookExplorer, line: str) -> bool:
    """
    Handle one interactive command.

    Returns:
        False when the user asked to quit
    """
    try:
        words = shlex.split(line)
    except ValueError as e:
        print(f"Could not read command: {e}")
        return True

    if not words:
        return True

    command, rest = words[0].lower(), words[1:]

    if command in ("quit", "exit", "q"):
        return False

    if command == "search":
        if not rest:
            print("Usage: search <title|isbn|author> <query>")
            return True
        try:
            search_type = SearchType.from_label(rest[0])
            query = " ".join(rest[1:])
        except ValueError:
            # No type given: search by title
            search_type, query = SearchType.TITLE, " ".join(rest)
        await explorer.handle_search(query, search_type)

    elif command == "sort":
        explorer.handle_sort()

    elif command == "filter":
        if len(rest) != 1 or rest[0].lower() not in ("on", "off"):
            print("Usage: filter on|off")
            return True
        explorer.handle_filter(rest[0].lower() == "on")

    elif command == "show":
        try:
            explorer.handle_select_index(int(rest[0]))
        except (IndexError, ValueError):
            print(f"Usage: show <n>, where n is between 1 and {len(explorer.displayed)}")

    elif command == "list":
        explorer.render_list(explorer.displayed)

    elif command == "help":
        print(INTERACTIVE_HELP)

    else:
        print(f"Unknown command: {command}. Type 'help' for commands.")

    return True


def interactive(args, config: Config) -> int:
    """
    Read commands until the user quits or input ends.

    Input is read on the main thread so Ctrl-C at the prompt interrupts
    it directly; each command then runs on one long-lived event loop.
    """
    loop = asyncio.new_event_loop()
    client = open_client(args, config)
    explorer = BookExplorer(
        SearchOrchestrator(client, config.MAX_RESULTS), make_renderer(args.format)
    )

    try:
        print(INTERACTIVE_HELP)
        while True:
            try:
                line = input("> ")
            except EOFError:
                return 0
            if not loop.run_until_complete(dispatch(explorer, line)):
                return 0
    finally:
        if args.use_async:
            loop.run_until_complete(client.close())
        else:
            client.close()
        loop.close()


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Book Explorer - search Google Books from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search by title
  %(prog)s search "Dune"

  # Highest rated e-books by an author, with details for the top one
  %(prog)s search "Frank Herbert" --type author --sort --ebook-only --select 1

  # Interactive session
  %(prog)s interactive --format compact
        """
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Log requests")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--format", choices=sorted(RENDERERS), default="table", help="Output format")
    output.add_argument("--async", dest="use_async", action="store_true", help="Use async client")

    # Search command
    search_parser = subparsers.add_parser("search", parents=[output], help="Search for books")
    search_parser.add_argument("query", help="Search query")
    search_parser.add_argument(
        "--type", choices=["title", "isbn", "author"], default="title", help="Field to search (default: title)"
    )
    search_parser.add_argument("--sort", action="store_true", help="Sort by rating, highest first")
    search_parser.add_argument("--ebook-only", action="store_true", help="Only show e-books")
    search_parser.add_argument("--select", type=int, help="Show details for the book at this position")

    # Interactive command
    subparsers.add_parser("interactive", parents=[output], help="Explore results interactively")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config()
    setup_logging(config, args.verbose)

    try:
        if args.command == "search":
            sys.exit(asyncio.run(search_once(args, config)))

        elif args.command == "interactive":
            sys.exit(interactive(args, config))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
