"""
Command-line interface for nflverse_fetch.

This module provides a unified CLI for loading nflverse datasets, checking
the current season and week, and managing the download cache.
"""

import argparse
import inspect
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import CacheMode, get_config, update_config
from .errors import NFLReadError
from .ingest import LOADERS
from .utils.cache import cache_info, clear_cache
from .utils.dates import get_current_season, get_current_week

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Set up the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="nflverse-fetch",
        description="nflverse_fetch - cached downloads of nflverse NFL datasets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nflverse-fetch season --roster
  nflverse-fetch week --schedule
  nflverse-fetch load pbp --seasons 2022 2023 --output pbp.parquet
  nflverse-fetch load player_stats --seasons 2023 --summary-level reg
  nflverse-fetch --cache filesystem cache info
  nflverse-fetch --cache filesystem cache clear --pattern 3f2a
        """
    )
    parser.add_argument('--cache', choices=[mode.value for mode in CacheMode],
                        help='Cache tier to use (overrides NFLVERSE_CACHE)')
    parser.add_argument('--verbose', action='store_true', help='Log every download')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Season command
    season_parser = subparsers.add_parser('season', help='Show the current NFL season')
    season_parser.add_argument('--roster', action='store_true', help='Use the March 15 roster cutoff')

    # Week command
    week_parser = subparsers.add_parser('week', help='Show the current NFL week')
    week_parser.add_argument('--schedule', action='store_true',
                             help='Use the live schedule instead of the calendar (network access)')

    # Load command
    load_parser = subparsers.add_parser('load', help='Load a dataset')
    load_parser.add_argument('dataset', choices=sorted(LOADERS), help='Dataset name')
    load_parser.add_argument('--seasons', type=int, nargs='+', help='Season years (default: current season)')
    load_parser.add_argument('--all-seasons', action='store_true', help='Load every available season')
    load_parser.add_argument('--stat-type', type=str, help='Stat type for datasets that take one')
    load_parser.add_argument('--summary-level', type=str, help='Summary level for datasets that take one')
    load_parser.add_argument('--ranking-type', type=str, help='Ranking type for ff_rankings')
    load_parser.add_argument('--model-version', type=str, help='Model version for ff_opportunity')
    load_parser.add_argument('--output', type=str, help='Write to a .csv or .parquet file instead of printing')

    # Cache command
    cache_parser = subparsers.add_parser('cache', help='Cache operations')
    cache_subparsers = cache_parser.add_subparsers(dest='cache_action', help='Cache action')
    cache_subparsers.add_parser('info', help='Show cache settings and entry count')
    clear_parser = cache_subparsers.add_parser('clear', help='Remove cached entries')
    clear_parser.add_argument('--pattern', type=str, help='Only remove keys containing this text')

    return parser


def configure_logging(verbose: bool) -> None:
    """Configure root logging for CLI runs."""
    level = logging.DEBUG if verbose else getattr(logging, get_config().log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def apply_overrides(args) -> None:
    """Install a configuration reflecting the global CLI flags."""
    config = get_config()
    overrides: Dict[str, Any] = {}
    if args.cache:
        overrides['cache_mode'] = CacheMode.from_string(args.cache)
    if args.verbose:
        overrides['verbose'] = True
    if overrides:
        update_config(replace(config, **overrides))


def build_loader_kwargs(args) -> Dict[str, Any]:
    """Map CLI options onto the keyword arguments the chosen loader accepts."""
    loader = LOADERS[args.dataset]
    params = inspect.signature(loader).parameters
    candidates: Dict[str, Optional[Any]] = {
        'stat_type': args.stat_type,
        'summary_level': args.summary_level,
        'ranking_type': args.ranking_type,
        'model_version': args.model_version,
    }

    kwargs: Dict[str, Any] = {}
    if 'seasons' in params:
        if args.all_seasons:
            kwargs['seasons'] = True
        elif args.seasons:
            kwargs['seasons'] = args.seasons
    for name, value in candidates.items():
        if value is None:
            continue
        if name not in params:
            raise NFLReadError(f"Dataset '{args.dataset}' does not accept --{name.replace('_', '-')}")
        kwargs[name] = value
    return kwargs


def run_load(args) -> None:
    """Run a dataset loader and print or save the result."""
    kwargs = build_loader_kwargs(args)
    print(f"\n=== Loading {args.dataset} ===")
    df = LOADERS[args.dataset](**kwargs)

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        if output.suffix == '.parquet':
            df.to_parquet(output, index=False, engine="pyarrow")
        else:
            df.to_csv(output, index=False)
        print(f"📁 {len(df)} rows saved to: {output}")
    else:
        print(f"Rows: {df.shape[0]}, Columns: {df.shape[1]}")
        print(df.head())


def show_cache_info() -> None:
    """Show cache settings and the number of cached entries."""
    info = cache_info()
    print("\n=== Cache Status ===")
    print(f"  Mode: {info['cache_mode']}")
    print(f"  Directory: {info['cache_dir']}")
    print(f"  Duration: {info['cache_duration']}s")
    print(f"  Entries: {info['entries']}")


def run_cache_clear(args) -> None:
    """Clear all cache entries, or those whose key contains a pattern."""
    clear_cache(args.pattern)
    if args.pattern:
        print(f"✅ Cleared cache entries matching '{args.pattern}'")
    else:
        print("✅ Cleared cache")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        apply_overrides(args)
        configure_logging(args.verbose)

        if args.command == 'season':
            print(get_current_season(roster=args.roster))
        elif args.command == 'week':
            print(get_current_week(use_date=not args.schedule))
        elif args.command == 'load':
            run_load(args)
        elif args.command == 'cache':
            if args.cache_action == 'info':
                show_cache_info()
            elif args.cache_action == 'clear':
                run_cache_clear(args)
            else:
                print("Please specify a cache action: info or clear")
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1
    except NFLReadError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
