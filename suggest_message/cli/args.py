"""CLI Argument Parsing"""

import argparse
import argcomplete

from suggest_message import __version__

EPILOG = """\
examples:
  git suggest-message
  git suggest-message --commit
  git suggest-message --commit --edit
  git suggest-message --commit --yes
  git diff HEAD~1 | git suggest-message

env:
  MINIMAX_CP_KEY     API key (required)
  MINIMAX_ENDPOINT   Messages endpoint (default: https://api.minimax.io/anthropic/v1/messages)
  MINIMAX_MODEL      Model name (default: MiniMax-M2.1)"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='git suggest-message',
        description='Draft a commit message using an LLM from a staged diff (or stdin).',
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('--commit', action='store_true', help='Commit with the suggested message (after confirmation unless --yes)')
    parser.add_argument('--edit', action='store_true', help='Open editor before finalizing commit (implies --commit)')
    parser.add_argument('--yes', action='store_true', help='Skip confirmation prompt (implies --commit)')
    parser.add_argument('--debug', action='store_true', help='Print extra debug info to stderr')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    if args.edit or args.yes:
        args.commit = True

    return args
