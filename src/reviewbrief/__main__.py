from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Callable, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from reviewbrief.console import DIVIDER, print_result
from reviewbrief.core.config_models import Settings
from reviewbrief.pipeline.assembler import ReviewPipeline

EXIT_COMMANDS = {"quit", "exit"}


class _Exit(Exception):
    pass


def _ask(read: Callable[[str], str], label: str) -> str:
    answer = read(label).strip()
    if answer.lower() in EXIT_COMMANDS:
        raise _Exit()
    return answer


async def interactive_loop(
    pipeline: ReviewPipeline,
    read: Callable[[str], str] = input,
    show_prompt: bool = False,
) -> None:
    """
    Ask for repository, ticket and PR each turn until quit/exit, EOF or Ctrl-C.
    Every input is optional; a turn with nothing to look up is skipped.
    """
    print("ReviewBrief: leave a field empty to skip it, type 'quit' to exit.")
    while True:
        try:
            repo = _ask(read, "Repository name: ")
            ticket_id = _ask(read, "Jira ticket ID: ")
            pr_number = _ask(read, "PR number: ")
        except (_Exit, EOFError, KeyboardInterrupt):
            print("\nBye.")
            return

        print(DIVIDER)
        result = await pipeline.run(ticket_id=ticket_id, pr_number=pr_number, repo=repo)
        print_result(result, show_prompt=show_prompt)


async def run_once(
    pipeline: ReviewPipeline,
    ticket_id: Optional[str],
    pr_number: Optional[str],
    repo: Optional[str],
    show_prompt: bool = False,
) -> int:
    result = await pipeline.run(ticket_id=ticket_id, pr_number=pr_number, repo=repo)
    print_result(result, show_prompt=show_prompt)
    if result.skipped or result.error:
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="reviewbrief",
        description="Summarize a Jira ticket and/or GitHub pull request with a local model.",
    )
    parser.add_argument("--repo", default="", help="Repository name (owner comes from GITHUB_OWNER)")
    parser.add_argument("--ticket", default="", help="Jira ticket ID, e.g. PROJ-123")
    parser.add_argument("--pr", default="", help="Pull request number")
    parser.add_argument("--once", action="store_true", help="Run a single turn from the flags above and exit")
    parser.add_argument("--show-prompt", action="store_true", help="Print the rendered prompt before the answer")
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        settings = Settings.from_env()
    except ValidationError as validation_error:
        print(f"[ReviewBrief] ❌ Invalid model configuration:\n{validation_error}")
        return 2

    pipeline = ReviewPipeline.from_settings(settings)

    if args.once:
        return asyncio.run(run_once(pipeline, args.ticket, args.pr, args.repo, show_prompt=args.show_prompt))

    try:
        asyncio.run(interactive_loop(pipeline, show_prompt=args.show_prompt))
    except KeyboardInterrupt:
        print("\nBye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
