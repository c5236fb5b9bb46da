"""Command-line interface for the bounded Game of Life engine."""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, Tuple

from ..core.codec import ALIVE_SYMBOL, DEAD_SYMBOL, ROW_DELIMITER, format_grid, parse_grid, pretty_format
from ..core.engine import GridEngine
from ..core.patterns import SELF_TEST_CASES, TransitionCase

logger = logging.getLogger(__name__)


class CLILife:
    """Runs single transitions and the built-in self-test from the command line."""

    def __init__(
        self,
        row_delimiter: str = ROW_DELIMITER,
        alive: str = ALIVE_SYMBOL,
        dead: str = DEAD_SYMBOL,
    ) -> None:
        self.row_delimiter = row_delimiter
        self.alive = alive
        self.dead = dead

    def encode(self, engine: GridEngine) -> str:
        """Encode the engine's grid with this interface's symbols."""
        return format_grid(engine, self.row_delimiter, self.alive, self.dead)

    def run_transition(self, state: str) -> GridEngine:
        """Parse a state, advance it one generation and return the engine.

        Raises:
            ValueError: If the state cannot be parsed
        """
        grid = parse_grid(state, self.row_delimiter, self.alive, self.dead)
        logger.debug("Parsed %dx%d grid with population %d", grid.num_rows, grid.num_cols, grid.population)

        engine = GridEngine(grid)
        engine.step()
        return engine

    def run_self_test(
        self, cases: Iterable[TransitionCase] = SELF_TEST_CASES
    ) -> List[Tuple[TransitionCase, str]]:
        """Run one transition per case.

        Cases are always written with the default symbols, independent of
        this interface's configuration.

        Returns:
            List of (case, actual) pairs for the cases that failed
        """
        failures = []
        for case in cases:
            engine = GridEngine(parse_grid(case.start))
            engine.step()
            actual = format_grid(engine)
            if actual != case.expected:
                failures.append((case, actual))
            logger.debug("Self-test %r: %s", case.name, "ok" if actual == case.expected else "FAILED")

        return failures


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Advance a bounded Conway's Game of Life grid by one generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Advance a 5x5 grid one generation
  lifegrid-cli 01000,10011,11001,01000,10001

  # Non-square grids work too
  lifegrid-cli 00000,01110,00000

  # Use custom symbols and row separator
  lifegrid-cli --alive '#' --dead . --delimiter / '.#.#/.##./....'

  # Show the demo grid and run the built-in self-test
  lifegrid-cli
        """,
    )

    parser.add_argument(
        "state",
        nargs="?",
        help="Encoded start grid; omit to run the built-in self-test",
    )

    parser.add_argument(
        "-d",
        "--delimiter",
        default=ROW_DELIMITER,
        help=f"Row separator in the encoded grid (default: {ROW_DELIMITER!r})",
    )

    parser.add_argument(
        "--alive",
        default=ALIVE_SYMBOL,
        help=f"Symbol for a live cell (default: {ALIVE_SYMBOL!r})",
    )

    parser.add_argument(
        "--dead",
        default=DEAD_SYMBOL,
        help=f"Symbol for a dead cell (default: {DEAD_SYMBOL!r})",
    )

    parser.add_argument(
        "-b",
        "--banner",
        action="store_true",
        help="Print a separator line before the pretty rendering",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if len(args.alive) != 1:
        errors.append("Alive symbol must be a single character")

    if len(args.dead) != 1:
        errors.append("Dead symbol must be a single character")

    if args.alive == args.dead:
        errors.append("Alive and dead symbols must differ")

    if len(args.delimiter) != 1:
        errors.append("Delimiter must be a single character")
    elif args.delimiter in (args.alive, args.dead):
        errors.append("Delimiter must differ from the cell symbols")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_failures(failures: List[Tuple[TransitionCase, str]]) -> None:
    """Print failed self-test cases."""
    for case, actual in failures:
        print(f"FAILED {case.name}: {case.start} -> {actual} (expected {case.expected})")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(name)s: %(message)s")

    if not validate_args(args):
        return 1

    cli = CLILife(row_delimiter=args.delimiter, alive=args.alive, dead=args.dead)

    try:
        if args.state is not None:
            engine = cli.run_transition(args.state)
            print(cli.encode(engine))
            print(pretty_format(engine, banner=args.banner))
            return 0

        # No input: show the demo grid and run the self-test table
        print(pretty_format(GridEngine(), banner=True))
        failures = cli.run_self_test()
        if failures:
            print_failures(failures)
            print("Tests failed")
            return 1

        print("Tests passed")
        return 0

    except ValueError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
