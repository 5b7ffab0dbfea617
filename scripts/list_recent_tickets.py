#!/usr/bin/env python3
"""List the newest Jira issues of a project."""

import asyncio
import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from dotenv import load_dotenv

load_dotenv()

from reviewbrief.console import print_ticket_list
from reviewbrief.core.config_models import Settings
from reviewbrief.core.errors import FetchError, describe
from reviewbrief.jira.issue import search_recent_tickets


async def list_recent_tickets(project_key: str, limit: int) -> int:
    """Fetch and display the project's most recently created issues."""
    settings = Settings.from_env()

    try:
        tickets = await search_recent_tickets(project_key, settings.jira, limit=limit)
    except FetchError as error:
        print(describe(error))
        return 1

    if not tickets:
        print(f"No issues found in project {project_key}.")
        return 0

    print(f"Found {len(tickets)} issue(s) in {project_key}:\n")
    print_ticket_list(tickets)
    return 0


USAGE = "Usage: list_recent_tickets.py PROJECT_KEY [LIMIT]"


def main(argv: list[str]) -> int:
    if not argv:
        print(USAGE)
        return 2
    limit_arg = argv[1] if len(argv) > 1 else "20"
    if not limit_arg.isdigit() or int(limit_arg) < 1:
        print(USAGE)
        return 2
    return asyncio.run(list_recent_tickets(argv[0], int(limit_arg)))


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
