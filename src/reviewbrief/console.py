"""
Console rendering of fetched records and model output.

Every block ends with the same divider line.
"""
from __future__ import annotations

from reviewbrief.core.pr_models import PullRequestRecord
from reviewbrief.core.timestamps import format_timestamp
from reviewbrief.core.types import PromptResult, TicketRecord
from reviewbrief.prompts.review import render_file_summary

DIVIDER = "-------------------"
NO_DATA_MESSAGE = "No data provided: enter a Jira ticket ID and/or a PR number."


def print_ticket(ticket: TicketRecord) -> None:
    print(f"Issue Key: {ticket.key}")
    print(f"Summary: {ticket.summary}")
    print(f"Status: {ticket.status}")
    print(f"Description: {ticket.description}")
    print(DIVIDER)


def print_ticket_list(tickets: list[TicketRecord]) -> None:
    for ticket in tickets:
        print(f"Issue Key: {ticket.key}")
        print(f"Summary: {ticket.summary}")
        print(f"Status: {ticket.status}")
        print(DIVIDER)


def print_pull_request(pr: PullRequestRecord) -> None:
    print(f"PR #{pr.number}: {pr.title}")
    print(f"State: {pr.state}")
    print(f"Author: {pr.author_login}")
    print(f"Created: {format_timestamp(pr.created_at)}")
    print(f"Updated: {format_timestamp(pr.updated_at)}")
    print(render_file_summary(pr.files))
    print(DIVIDER)


def print_result(result: PromptResult, show_prompt: bool = False) -> None:
    """Print one pipeline turn: records, optionally the prompt, then the model's answer."""
    if result.skipped:
        print(NO_DATA_MESSAGE)
        return

    if result.context.ticket is not None:
        print_ticket(result.context.ticket)
    if result.context.pull_request is not None:
        print_pull_request(result.context.pull_request)

    if show_prompt:
        print(result.prompt)
        print(DIVIDER)

    if result.completion is not None:
        print("Model Response:")
        print(result.completion)
        print(DIVIDER)
