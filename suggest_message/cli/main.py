"""CLI Main Entry Point"""

import asyncio
import sys

from suggest_message.config import Config, ConfigError, get_config_path, load_config
from suggest_message.git import GitAnalyzer, GitError, DiffProcessor
from suggest_message.llm import LLMError, MiniMaxClient
from suggest_message.prompts import PromptBuilder
from suggest_message.output import (
    Spinner, colorize_commit_type, dim, print_debug, print_error, print_success,
)

from suggest_message.cli.args import parse_args
from suggest_message.cli.interrupt import InterruptHandler

NOTHING_STAGED = "Nothing staged. Stage changes first (git add ...)."
CONFIRM_PROMPT = "Commit with this message? [y/N] "


async def _read_diff(git: GitAnalyzer) -> str:
    """Piped stdin wins; otherwise the staged diff. '' means nothing to describe."""
    if not sys.stdin.isatty():
        # Raw bytes: a diff may carry non-UTF-8 file content
        raw_diff = sys.stdin.buffer.read().decode('utf-8', errors='replace').strip()
        if raw_diff:
            return raw_diff

    if not await git.get_staged_files():
        return ""
    return await git.get_staged_diff()


async def _generate_message(args, config: Config, prompt: str, spinner: Spinner) -> str:
    """Run the single remote call with the spinner up, and return its text."""
    api_key = config.require_api_key()

    if args.debug:
        print_debug(f"endpoint={config.endpoint} model={config.model}")
        print_debug(f"prompt: ~{len(prompt)//4} tokens ({len(prompt)} chars)")

    client = MiniMaxClient(
        api_key,
        endpoint=config.endpoint,
        model=config.model,
        max_tokens=config.max_tokens,
        timeout=config.timeout,
    )
    try:
        async with spinner:
            response = await client.generate(prompt)
    finally:
        await client.close()

    if args.debug:
        print_debug(f"response: {response.tokens_used} tokens, model={response.model}")
    return response.content


def _confirm(prompt: str) -> bool:
    """Ask on stderr; only y/yes confirms. EOF counts as no."""
    print(f"\n{prompt}", end='', file=sys.stderr, flush=True)
    try:
        answer = input()
    except EOFError:
        return False
    return answer.strip().lower() in ('y', 'yes')


async def run(args, config: Config, spinner: Spinner) -> int:
    """Main suggestion flow.

    Returns:
        int: Exit code
    """
    git = GitAnalyzer()

    try:
        raw_diff = await _read_diff(git)
        if not raw_diff:
            print_error(NOTHING_STAGED)
            return 1

        processed = DiffProcessor().process(raw_diff)
        prompt = PromptBuilder().build_from(processed)

        if args.debug:
            print_debug(f"config={get_config_path() or 'defaults'}")
            print_debug(
                f"files={processed.total_files} "
                f"continuity={processed.continuity_key if processed.has_continuity else '-'} "
                f"done_bullets={len(processed.done_bullets)}"
            )

        suggested = await _generate_message(args, config, prompt, spinner)
    except (GitError, LLMError, ConfigError) as e:
        print_error(str(e))
        return 1

    print(colorize_commit_type(suggested))

    if not args.commit:
        return 0

    if not args.yes and not _confirm(CONFIRM_PROMPT):
        return 0

    try:
        output = await git.commit(suggested, edit=args.edit)
    except GitError as e:
        print_error(str(e))
        return 1

    if output.strip():
        print(dim(output.rstrip()), file=sys.stderr)
    print_success("Committed.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    config = load_config()

    spinner = Spinner()
    InterruptHandler(spinner).install()

    return asyncio.run(run(args, config, spinner))
