"""
m3trans CLI Module
Command-line interface for exporting a music library to portable playlists.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ..core.config import LIBRARY_CONFIG, LOGGING_CONFIG, PROJECT_NAME, PROJECT_VERSION
from ..core.exceptions import M3transError
from ..core.logger import setup_logging
from ..models.library import Library
from ..services.ignore import IgnoreMatcher
from ..services.translator import PlaylistTranslator
from ..services.traversal import walk
from .display import DisplayManager


class M3transCLI:
    """Main CLI class for m3trans."""

    def __init__(self, display_manager: Optional[DisplayManager] = None):
        """Initialize the CLI."""
        self.display_manager = display_manager or DisplayManager()

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME,
            description=f"{PROJECT_NAME} - Portable playlist exporter v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s translate "Library.xml" /media/usb/music
  %(prog)s translate "Library.xml" /media/usb/music --dry-run --ignore-file ignores.txt
  %(prog)s tree "Library.xml"
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )

        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )

        translate_parser = subparsers.add_parser(
            'translate',
            help='Copy tracks and write playlists mirroring the library folders'
        )
        self._add_translate_args(translate_parser)

        tree_parser = subparsers.add_parser(
            'tree',
            help='Print every playlist with its full path and kind'
        )
        self._add_tree_args(tree_parser)

        return parser

    def _add_translate_args(self, parser: argparse.ArgumentParser):
        """Add arguments for translate mode."""
        parser.add_argument(
            'library_file',
            type=Path,
            help='Exported library document (XML property list)'
        )
        parser.add_argument(
            'output_path',
            type=Path,
            help='Directory receiving tracks/ and playlists/'
        )
        parser.add_argument(
            '--log-file', '-l',
            type=Path,
            default=Path(LOGGING_CONFIG["DEFAULT_FILE"]),
            help=f'Log file (default: {LOGGING_CONFIG["DEFAULT_FILE"]})'
        )
        parser.add_argument(
            '--dry-run', '-d',
            action='store_true',
            help='Report what would be done without touching the filesystem'
        )
        parser.add_argument(
            '--ignore-file',
            type=Path,
            help=f'Glob patterns of playlist paths to skip (default: {LIBRARY_CONFIG["IGNORE_FILE_NAME"]} '
                 f'next to the library file)'
        )
        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Also show informational messages on the console'
        )

    def _add_tree_args(self, parser: argparse.ArgumentParser):
        """Add arguments for tree mode."""
        parser.add_argument(
            'library_file',
            type=Path,
            help='Exported library document (XML property list)'
        )

    def handle_translate(
        self,
        library_file: Path,
        output_path: Path,
        log_file: Optional[Path] = None,
        dry_run: bool = False,
        ignore_file: Optional[Path] = None,
        verbose: bool = False,
    ) -> bool:
        """
        Export the library. Returns True when no per-item failure occurred.

        Raises:
            M3transError: on fatal errors
        """
        setup_logging(console_level="INFO" if verbose else LOGGING_CONFIG["CONSOLE_LEVEL"], log_file=log_file)

        library = Library.load(library_file)
        if ignore_file is None:
            ignore_file = library_file.with_name(LIBRARY_CONFIG["IGNORE_FILE_NAME"])
        ignore = IgnoreMatcher.from_file(ignore_file)

        with self.display_manager.create_progress_bar() as progress:
            task = progress.add_task("Copying tracks", total=len(library.tracks))

            def on_progress(done: int, total: int):
                progress.update(task, completed=done, total=total)

            translator = PlaylistTranslator(
                library,
                output_path,
                ignore=ignore,
                dry_run=dry_run,
                progress_callback=on_progress,
            )
            summary = translator.run()

        self.display_manager.display_summary(summary)
        return summary.succeeded

    def handle_tree(self, library_file: Path) -> int:
        """Print the playlist tree. Returns the number of playlists printed."""
        library = Library.load(library_file)
        return self.display_manager.display_playlist_tree(walk(library))

    def run(self, args: List[str] = None):
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        try:
            if parsed_args.mode == 'translate':
                ok = self.handle_translate(
                    library_file=parsed_args.library_file,
                    output_path=parsed_args.output_path,
                    log_file=parsed_args.log_file,
                    dry_run=parsed_args.dry_run,
                    ignore_file=parsed_args.ignore_file,
                    verbose=parsed_args.verbose,
                )
                sys.exit(0 if ok else 1)
            elif parsed_args.mode == 'tree':
                self.handle_tree(parsed_args.library_file)
                sys.exit(0)
        except KeyboardInterrupt:
            self.display_manager.print_warning("Operation cancelled by user.")
            sys.exit(1)
        except M3transError as e:
            self.display_manager.print_error(str(e))
            sys.exit(1)
