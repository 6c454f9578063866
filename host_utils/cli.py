#!/usr/bin/env python3
"""
host_utils/cli.py

Command-line front end for host_utils:

    host-utils run [--timeout N] [--no-wait] TOKEN...
    host-utils stop NAME
    host-utils find ROOT NAME [--dirs]
"""

import argparse
import sys

from .command_runner import CommandRunner
from .debug_utils import enable_file_logging, set_console_verbosity
from .errors import InvalidArgumentError
from .file_finder import find
from .process_terminator import ProcessTerminator
from .settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cross-platform command runner, process killer and file finder.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Show debug output (-v) or debug plus command output traces (-vv).")
    parser.add_argument("--log-file", action="store_true", help="Also write debug output to ~/logs.")
    subparsers = parser.add_subparsers(dest="command", title="commands", required=True)

    parser_run = subparsers.add_parser("run", help="Run a command through the platform shell.")
    parser_run.add_argument("--timeout", type=int, default=None,
                            help="Seconds to wait for the command (default: 600).")
    parser_run.add_argument("--no-wait", action="store_true", help="Start the command and return immediately.")
    parser_run.add_argument("--kill-on-timeout", action="store_true",
                            help="Kill the command and its children if it outlives the timeout.")
    parser_run.add_argument("--bounded-drain", action="store_true",
                            help="Stop reading output at the timeout even if the command keeps its output open.")
    parser_run.add_argument("tokens", nargs="+", help="Command tokens, appended after the shell prefix.")

    parser_stop = subparsers.add_parser("stop", help="Kill every process with the given name.")
    parser_stop.add_argument("name", help="Process (image) name.")

    parser_find = subparsers.add_parser("find", help="Find a file by name under a directory.")
    parser_find.add_argument("root", help="Directory to search.")
    parser_find.add_argument("name", help="File name to look for.")
    parser_find.add_argument("--dirs", action="store_true", help="Let directory names match too.")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose >= 2:
        set_console_verbosity("Verbose")
    elif args.verbose == 1:
        set_console_verbosity("Debug")
    if args.log_file:
        enable_file_logging()

    try:
        if args.command == "run":
            runner = CommandRunner(
                get_settings(),
                kill_on_timeout=args.kill_on_timeout,
                bounded_drain=args.bounded_drain,
            )
            result = runner.execute(args.tokens, wait=not args.no_wait, timeout=args.timeout)
            if result.output:
                sys.stdout.write(result.output)
            if not result.ok:
                print(f"Error: {result.error}", file=sys.stderr)
                return 1
            return 0

        if args.command == "stop":
            result = ProcessTerminator(get_settings()).stop(args.name)
            if result.killed:
                print(f"Kill issued for: {', '.join(result.killed)}")
            if not result.ok:
                print(f"Error: {result.error}", file=sys.stderr)
                return 1
            return 0

        if args.command == "find":
            match = find(args.root, args.name, args.dirs)
            if match is None:
                print(f"'{args.name}' not found under {args.root}", file=sys.stderr)
                return 1
            print(match)
            return 0
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 2


if __name__ == "__main__":
    sys.exit(main())
