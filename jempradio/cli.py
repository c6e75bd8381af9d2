"""Command-line entry point: what's playing on JEMP Radio."""

import argparse
import json
import sys

from loguru import logger

from jempradio.config import USER_AGENT
from jempradio.http_utils import create_session
from jempradio.relisten import RelistenError, RelistenResolver
from jempradio.status import FeedError, fetch_status
from jempradio.track import filter_artist, without_meta_tracks


def setup_logging(verbose=False):
    """Send log records to stderr, one line each."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING",
               format="{level}: {message}")


def select_tracks(status, args):
    """Pick the tracks to show according to --last, --all and --artist."""
    if args.last == 1:
        tracks = [status.current_track] if status.current_track else []
    else:
        tracks = status.last_n(args.last)
    if not args.all:
        tracks = without_meta_tracks(tracks)
    if args.artist:
        tracks = filter_artist(tracks, lambda a: a == args.artist)
    return tracks


def make_resolver(session, tracks, args):
    """Relisten resolver, or None when links are off or unavailable."""
    if args.no_links:
        return None
    if not any(t.artist and t.performance_date for t in tracks):
        return None
    resolver = RelistenResolver(session=session)
    try:
        resolver.load()
    except RelistenError as e:
        logger.warning(f"{e} (showing tracks without streaming links)")
        return None
    return resolver


def print_text(tracks, resolver, numbered):
    for i, track in enumerate(tracks, 1):
        lines = track.render(resolver).split("\n")
        if numbered:
            print(f"{i:2d}. {lines[0]}")
            for url in lines[1:]:
                print(f"    {url}")
        else:
            print("\n".join(lines))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="jempradio",
        description="Show what's playing on JEMP Radio, with show links",
    )
    parser.add_argument("--last", type=int, default=1, metavar="N",
                        help="Show this many latest songs "
                             "(0 shows entire available history)")
    parser.add_argument("--json", action="store_true",
                        help="Print tracks as JSON")
    parser.add_argument("--all", action="store_true",
                        help="Include station announcement tracks")
    parser.add_argument("--artist", help="Only show tracks by this artist")
    parser.add_argument("--no-links", action="store_true",
                        help="Skip the Relisten artist lookup")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging to stderr")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.last < 0:
        parser.error("--last must be zero or positive")
    setup_logging(args.verbose)

    session = create_session(USER_AGENT)
    try:
        status = fetch_status(session)
    except FeedError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    tracks = select_tracks(status, args)
    resolver = make_resolver(session, tracks, args)

    if args.json:
        print(json.dumps([t.to_dict(resolver) for t in tracks], indent=2))
        return
    if not tracks:
        print("No matching tracks.")
        return
    print_text(tracks, resolver, numbered=args.last != 1)
