from __future__ import annotations

import asyncio
from typing import Optional, Union

from reviewbrief.agents.reviewer import ReviewModel
from reviewbrief.core.config_models import Settings
from reviewbrief.core.errors import ModelUnavailable, describe
from reviewbrief.core.types import DevelopmentContext, PromptResult
from reviewbrief.pipeline.sources import (
    GitHubPullRequestSource,
    JiraTicketSource,
    PullRequestSource,
    TicketSource,
)
from reviewbrief.prompts.review import build_prompt

PrNumber = Union[int, str, None]


async def _absent() -> None:
    return None


def parse_pr_number(value: PrNumber) -> Optional[int]:
    """Blank -> None. Anything that is not a positive integer is reported and skipped."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    text = text.lstrip("#")
    if not text.isdigit() or int(text) < 1:
        print(f"[ReviewBrief] ⚠️ Invalid PR number {value!r}, skipping pull request")
        return None
    return int(text)


async def assemble(
    ticket_id: Optional[str],
    pr_number: PrNumber,
    repo: Optional[str],
    tickets: TicketSource,
    pull_requests: PullRequestSource,
) -> DevelopmentContext:
    """
    Fetch whatever was asked for and collect it into one context.

    Blank identifiers skip their source. The ticket and PR fetches run
    concurrently and independently: one failing leaves only its own field empty.
    """
    ticket_id = (ticket_id or "").strip()
    repo = (repo or "").strip()
    number = parse_pr_number(pr_number)

    if number is not None and not repo:
        print(f"[ReviewBrief] ⚠️ A repository name is required to fetch PR #{number}")
        number = None

    ticket_fetch = tickets.fetch(ticket_id) if ticket_id else _absent()
    pr_fetch = pull_requests.fetch(number, repo) if number is not None else _absent()

    ticket, pull_request = await asyncio.gather(ticket_fetch, pr_fetch)
    return DevelopmentContext(ticket=ticket, pull_request=pull_request)


class ReviewPipeline:
    """fetch -> assemble -> render -> invoke, once per call to run()."""

    def __init__(self, tickets: TicketSource, pull_requests: PullRequestSource, model: ReviewModel):
        self.tickets = tickets
        self.pull_requests = pull_requests
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> ReviewPipeline:
        return cls(
            tickets=JiraTicketSource(settings.jira),
            pull_requests=GitHubPullRequestSource(settings.github),
            model=ReviewModel(settings.model),
        )

    async def run(
        self,
        ticket_id: Optional[str] = None,
        pr_number: PrNumber = None,
        repo: Optional[str] = None,
    ) -> PromptResult:
        context = await assemble(ticket_id, pr_number, repo, self.tickets, self.pull_requests)
        if context.is_empty:
            return PromptResult(context=context)

        prompt = build_prompt(context)
        try:
            completion = await self.model.invoke(prompt)
        except ModelUnavailable as error:
            print(describe(error))
            return PromptResult(context=context, prompt=prompt, error=str(error))

        return PromptResult(context=context, prompt=prompt, completion=completion)


async def run_pipeline(
    ticket_id: Optional[str] = None,
    pr_number: PrNumber = None,
    repo: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> PromptResult:
    """One-shot convenience wrapper: build a pipeline from settings (or the environment) and run it."""
    pipeline = ReviewPipeline.from_settings(settings or Settings.from_env())
    return await pipeline.run(ticket_id, pr_number, repo)
