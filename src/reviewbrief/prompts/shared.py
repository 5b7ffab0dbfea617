"""
Fixed prompt fragments for the review prompt.

The preamble and closing instruction wrap every prompt; the placeholders
stand in for data the upstream APIs leave out, so the model never sees an
empty label or a literal "None".
"""
from reviewbrief.core.types import NO_DESCRIPTION as TICKET_NO_DESCRIPTION

# =============================================================================
# PREAMBLE
# =============================================================================
# Opens every prompt. Addresses the model as the reviewer.
# =============================================================================

PREAMBLE = """You are a senior software engineer reviewing development work for your team.
Below is information about a Jira ticket and/or a GitHub pull request.
Read it carefully and explain what is being worked on."""


# =============================================================================
# CLOSING INSTRUCTION
# =============================================================================
# Asks for exactly two labeled sections so the answer reads the same every turn.
# =============================================================================

CLOSING_INSTRUCTION = """Respond with exactly two sections:
Context: A single paragraph summarizing the work described above.
Opinion: A direct opinion on whether the pull request addresses the ticket, and what is missing if it does not."""


# =============================================================================
# PLACEHOLDERS
# =============================================================================

NO_PATCH = "No patch available"
NO_FILES = "No files changed"
NO_DESCRIPTION = TICKET_NO_DESCRIPTION
