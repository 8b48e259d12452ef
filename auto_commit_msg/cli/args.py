"""CLI Argument Parsing"""

import argparse
import argcomplete

from auto_commit_msg import __version__
from auto_commit_msg.config import DEFAULT_CONFIG_FILENAME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='auto-commit-msg',
        description='Generate a conventional commit message from the staged diff',
        epilog='Example: auto-commit-msg .git/COMMIT_EDITMSG (or use as a prepare-commit-msg hook)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('commit_msg_file', nargs='?', default=None, metavar='FILE', help='Write the message to FILE instead of stdout')
    # prepare-commit-msg hooks also pass the commit source and SHA
    parser.add_argument('hook_args', nargs='*', help=argparse.SUPPRESS)

    parser.add_argument('--config', type=str, default=None, metavar='PATH', help=f'Config file (default: {DEFAULT_CONFIG_FILENAME})')
    parser.add_argument('--trace', action='store_true', help='Append model and timing trace to the message')
    parser.add_argument('--verbose', action='store_true', help='Show debug info on stderr (config, model, timings)')

    argcomplete.autocomplete(parser)
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
