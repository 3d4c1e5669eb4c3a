# apps/cli/solve.py
"""
Print the next best (hopefully) guess when solving a wordle puzzle.

Each row describes a single wordle result row. Put a - in front of each
character that is gray, a ~ in front of each character that is yellow, and
leave the green ones as is.

Example:
    wordle-solve -- "-r -a ~i -s -e" "-h -o ~t -l y"

Other modes:
    wordle-solve --test crane          play against a known answer
    wordle-solve --full-test           play against every word, print histogram
    wordle-solve --check               validate the word list and exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wordle_solve.cache import FirstGuessCache
from wordle_solve.config import SolveConfig
from wordle_solve.datasets import load_dictionary, normalize_word, pretty_summary, validate_wordlist
from wordle_solve.engine import parse_row
from wordle_solve.errors import WordleSolveError
from wordle_solve.harness import RoundResult, guess_histogram, run_batch, run_case, solve_round, write_csv
from wordle_solve.solvers import EliminationSolver

log = logging.getLogger("wordle_solve")


def report_round(result: RoundResult, list_limit: int) -> List[str]:
    """Format one round for the console."""
    lines = [f"{len(result.remaining)}/{result.total} words remaining"]
    if result.no_best_guess or len(result.remaining) < list_limit or len(result.remaining) <= 2:
        lines += [f"  {w}" for w in result.remaining]
    if result.no_best_guess:
        lines.append("No single best guess: every remaining word scores the same.")
    else:
        lines.append(f"Best guess: {result.guess}")
    return lines


def _progress_enabled(mode: str) -> bool:
    if mode == "auto":
        return sys.stderr.isatty()
    return mode == "bar"


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_parser(cfg: SolveConfig) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordle-solve",
        description="Print out the next best (hopefully) guess when solving a wordle puzzle.",
        epilog='Example: wordle-solve -- "-r -a ~i -s -e" "-h -o ~t -l y"',
    )
    ap.add_argument("constraint", nargs="*",
                    help="one or more result rows: '-x' gray, '~x' yellow, 'x' green")
    ap.add_argument("-w", "--words", default=cfg.words_path, metavar="FILE",
                    help="word list, one word per line (default: %(default)s)")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("-t", "--test", metavar="TEST",
                      help="see how the algorithm performs against the given word")
    mode.add_argument("--full-test", action="store_true",
                      help="see how the algorithm performs against every word")
    mode.add_argument("--check", action="store_true",
                      help="validate the word list and exit")
    ap.add_argument("--csv", metavar="PATH", help="with --full-test, also write per-game results")
    ap.add_argument("--workers", type=int, default=cfg.workers,
                    help="processes used for scoring (default: %(default)s)")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar while scoring (auto = only on a terminal)")
    ap.add_argument("--no-cache", action="store_true", help="do not read or write the first-guess cache")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug")
    return ap


def _run(args: argparse.Namespace, cfg: SolveConfig) -> int:
    if args.check:
        rep = validate_wordlist(args.words)
        print(pretty_summary(rep))
        return 0 if rep["passed"] else 1

    dictionary = load_dictionary(args.words)

    cache = None
    if not args.no_cache and cfg.cache_path is not None:
        cache = FirstGuessCache(cfg.cache_path).load()

    with EliminationSolver(
        dictionary,
        workers=args.workers,
        progress=_progress_enabled(args.progress),
        first_guess=cache.get(dictionary.sha256) if cache else None,
    ) as solver:
        status = _play(args, cfg, solver)

    if cache is not None and solver.first_guess is not None \
            and cache.get(dictionary.sha256) != solver.first_guess:
        cache.put(dictionary.sha256, solver.first_guess)
        try:
            cache.save()
        except OSError as e:
            log.warning(f"Could not write cache {cache.path}: {e}")
    return status


def _play(args: argparse.Namespace, cfg: SolveConfig, solver: EliminationSolver) -> int:
    dictionary = solver.dictionary
    if args.test:
        r = run_case(solver, normalize_word(args.test))
        for guess, _ in r["history"]:
            print(f"Guess: {guess}")
        return 0 if r["success"] else 1

    if args.full_test:
        results = run_batch(solver, dictionary.words, progress=_progress_enabled(args.progress))
        for r in results:
            print(f"Guessed {r['answer']} from " + " ".join(g for g, _ in r["history"]))
        print(guess_histogram(results))
        if args.csv:
            print(f"Wrote: {write_csv(results, args.csv)}")
        return 0

    history = [parse_row(row, dictionary.length) for row in args.constraint]
    result = solve_round(solver, history)
    print("\n".join(report_round(result, cfg.list_limit)))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = SolveConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    ap = build_parser(cfg)
    args = ap.parse_args(argv)
    if args.csv and not args.full_test:
        ap.error("--csv requires --full-test")
    _configure_logging(args.verbose)

    try:
        return _run(args, cfg)
    except FileNotFoundError:
        print(f"Error: word list not found: {args.words}", file=sys.stderr)
        return 2
    except WordleSolveError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
