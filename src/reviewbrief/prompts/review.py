from __future__ import annotations

from reviewbrief.core.pr_models import FileChange, PullRequestRecord
from reviewbrief.core.types import DevelopmentContext, TicketRecord
from reviewbrief.prompts.shared import CLOSING_INSTRUCTION, NO_DESCRIPTION, NO_FILES, NO_PATCH, PREAMBLE


def render_ticket_section(ticket: TicketRecord) -> str:
    return "\n".join([
        "Jira Ticket:",
        f"Key: {ticket.key}",
        f"Summary: {ticket.summary}",
        f"Description: {ticket.description}",
        f"Status: {ticket.status}",
    ])


def render_file_summary(files: tuple[FileChange, ...]) -> str:
    """One `path (status): +a -d` line per file, in fetch order."""
    if not files:
        return f"Files Changed:\n{NO_FILES}"
    lines = ["Files Changed:"]
    lines.extend(f"{change.path} ({change.status}): +{change.additions} -{change.deletions}" for change in files)
    return "\n".join(lines)


def render_patches(files: tuple[FileChange, ...]) -> str:
    """
    Labeled patch per file, separated by a blank line.
    Patch text is inserted verbatim; files without one get NO_PATCH.
    """
    blocks = []
    for change in files:
        patch = change.patch if change.patch is not None else NO_PATCH
        blocks.append(f"=== {change.path} ===\n{patch}")
    return "Patches:\n" + "\n\n".join(blocks)


def render_pull_request_section(pr: PullRequestRecord) -> str:
    header = "\n".join([
        "Pull Request:",
        f"Number: {pr.number}",
        f"Title: {pr.title}",
        f"State: {pr.state}",
        f"Author: {pr.author_login}",
        f"Description: {pr.body or NO_DESCRIPTION}",
    ])
    parts = [header, render_file_summary(pr.files)]
    if pr.files:
        parts.append(render_patches(pr.files))
    return "\n\n".join(parts)


def build_prompt(context: DevelopmentContext) -> str:
    """
    Render the review prompt for a context.

    Order is fixed: preamble, Jira, pull request, closing instruction. Absent
    sections are skipped entirely. Callers must not pass an empty context;
    if they do, only the preamble and closing instruction come back.
    """
    sections = [PREAMBLE]
    if context.ticket is not None:
        sections.append(render_ticket_section(context.ticket))
    if context.pull_request is not None:
        sections.append(render_pull_request_section(context.pull_request))
    sections.append(CLOSING_INSTRUCTION)
    return "\n\n".join(sections)
