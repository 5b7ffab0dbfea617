from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, ConfigDict

from reviewbrief.core.pr_models import PullRequestRecord

NO_DESCRIPTION = "No description provided"


class TicketRecord(BaseModel):
    """A Jira issue reduced to the fields the review prompt needs."""
    model_config = ConfigDict(frozen=True)

    key: str
    summary: str
    description: str = NO_DESCRIPTION
    status: str


class DevelopmentContext(BaseModel):
    """Per-turn aggregate of the optional ticket and pull request."""
    model_config = ConfigDict(frozen=True)

    ticket: Optional[TicketRecord] = None
    pull_request: Optional[PullRequestRecord] = None

    @property
    def is_empty(self) -> bool:
        return self.ticket is None and self.pull_request is None


class PromptResult(BaseModel):
    """Outcome of one pipeline run."""
    context: DevelopmentContext
    prompt: Optional[str] = None
    completion: Optional[str] = None
    error: Optional[str] = None

    @property
    def skipped(self) -> bool:
        """True when there was nothing to send to the model."""
        return self.prompt is None
