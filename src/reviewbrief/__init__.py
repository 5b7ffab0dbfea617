"""Jira ticket + GitHub pull request summaries from a local language model."""
from reviewbrief.pipeline.assembler import ReviewPipeline, assemble, run_pipeline
from reviewbrief.prompts.review import build_prompt

__version__ = "0.1.0"

__all__ = [
    "ReviewPipeline",
    "assemble",
    "build_prompt",
    "run_pipeline",
]
