#!/usr/bin/env python3
"""
hashrename CLI — Command line interface for content-addressed file renaming.
Expands glob patterns, renames every matched file to the hash of its content
(keeping the extension) and reports one line per file.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import threading
from typing import NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    from send2trash import send2trash
except ImportError:
    _MISSING_DEPS.append("send2trash")

try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    print("\nOr install the package with its dependencies:", file=sys.stderr)
    print("   pip install hashrename", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from hashrename import __version__
from hashrename.commands import RenameCommand
from hashrename.core.aggregator import ResultAggregator
from hashrename.core.errors import ConfigurationError
from hashrename.core.hasher import DEFAULT_ALGORITHM
from hashrename.core.models import RenameOutcome, RenameParams, RenameResult
from hashrename.aliases import (
    COLLISION_ALIASES, COLLISION_CHOICES, COLLISION_HELP_TEXT,
    HASH_CHOICES, HASH_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.verbose: bool = False
        self.quiet: bool = False
        self._output_lock = threading.Lock()  # result lines come from worker threads

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8')
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="hashrename",
            description="hashrename — rename files to the hash of their contents",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "patterns",
            nargs="+",
            type=str,
            metavar="GLOB",
            help="Glob patterns selecting the files to rename (each file is processed once)"
        )

        # Renaming options
        parser.add_argument(
            "--dry-run", "-n",
            action="store_true",
            dest="dry_run",
            help="Do not rename files, just print what renames would occur"
        )
        parser.add_argument(
            "--concurrency", "-j",
            default=0,
            type=int,
            metavar='N',
            help="Number of files to process at once. Default: 0 (chosen automatically)"
        )
        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default=DEFAULT_ALGORITHM,
            type=str,
            dest="hash_name",
            help=HASH_HELP_TEXT
        )
        parser.add_argument(
            "--skip-hashed-filenames",
            action=argparse.BooleanOptionalAction,
            default=True,
            dest="skip_hashed_filenames",
            help="Skip files whose names already look like a hash of the chosen size.\n"
                 "The hash itself is not checked. Default: enabled"
        )
        parser.add_argument(
            "--on-collision",
            choices=COLLISION_CHOICES,
            default="error",
            type=str,
            dest="on_collision",
            help=COLLISION_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only print errors"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and timing"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.concurrency < 0:
            self.error_exit("The --concurrency flag must be non-negative.")

        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

    def create_params(self, args: argparse.Namespace) -> RenameParams:
        """Create RenameParams from CLI arguments."""
        try:
            return RenameParams(
                patterns=list(args.patterns),
                dry_run=args.dry_run,
                concurrency=args.concurrency,
                hash_name=args.hash_name,
                skip_hashed_filenames=args.skip_hashed_filenames,
                on_collision=COLLISION_ALIASES[args.on_collision]
            )
        except ConfigurationError as e:
            self.error_exit(str(e))

    def report_discovered(self, count: int) -> None:
        if count == 0:
            self.warning("No files matched the given patterns")
        if not self.quiet:
            print(f"Processing {count} file(s)", flush=True)

    def report_result(self, result: RenameResult) -> None:
        """Prints one line per file. Called concurrently from worker threads."""
        with self._output_lock:
            if result.outcome is RenameOutcome.FAILED:
                print(f"⚠️  Couldn't handle {result.source!r}: {result.error}", file=sys.stderr, flush=True)
                return

            if self.quiet:
                return

            if result.outcome is RenameOutcome.SKIPPED:
                print(f"{result.source} (skipped: name already looks like a hash)", flush=True)
            elif result.outcome is RenameOutcome.TRASHED:
                print(f"{result.source} -> trash (duplicate of {result.destination})", flush=True)
            else:
                print(f"{result.source} -> {result.destination}", flush=True)

    def run_rename(self, params: RenameParams) -> ResultAggregator:
        """Execute rename workflow."""
        command = RenameCommand()
        if self.verbose:
            print(f"Hashing with {params.hash_name} (collisions: {params.on_collision.value})...")
        if params.dry_run and not self.quiet:
            print("Dry run: no files will be renamed")

        try:
            return command.execute(
                params,
                on_result=self.report_result,
                on_discovered=self.report_discovered
            )
        except ConfigurationError as e:
            self.error_exit(str(e))

    def output_summary(self, stats: ResultAggregator) -> None:
        if self.quiet:
            return
        print(stats.summary())
        if self.verbose:
            print(f"\n✅ Completed in {stats.total_time:.2f} seconds")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self) -> None:
        """Main entry point. Exits non-zero if any file failed."""
        args = self.parse_args()
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        if self.verbose:
            logging.getLogger("hashrename").setLevel(logging.DEBUG)

        params = self.create_params(args)
        stats = self.run_rename(params)
        self.output_summary(stats)

        if not stats.ok:
            self.error_exit(f"Encountered {stats.failures} error(s)")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
