"""
Error taxonomy for ReviewBrief.

Fetch errors are raised inside the source fetchers and caught at the
boundary of the public fetch functions, where they are printed and turned
into an absent result. ModelUnavailable is caught by the pipeline.
"""
from __future__ import annotations


class ReviewBriefError(Exception):
    """Base class for all ReviewBrief errors."""


class FetchError(ReviewBriefError):
    """A ticket or pull request could not be fetched."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


class ConfigurationMissing(FetchError):
    def __init__(self, source: str, missing: list[str]):
        self.missing = missing
        super().__init__(source, f"missing configuration: {', '.join(missing)}")


class NotFound(FetchError):
    def __init__(self, source: str, identifier: str):
        self.identifier = identifier
        super().__init__(source, f"no match for {identifier!r}")


class UpstreamError(FetchError):
    """Non-2xx response. Carries every status code seen, keyed by request name."""

    def __init__(self, source: str, status_codes: dict[str, int], body: str = ""):
        self.status_codes = status_codes
        self.body = body
        codes = ", ".join(f"{name}={code}" for name, code in status_codes.items())
        message = f"API returned status {codes}"
        if body:
            message += f"\nResponse body: {body}"
        super().__init__(source, message)


class TransportError(FetchError):
    """Network failure or an unparseable response."""

    def __init__(self, source: str, detail: str):
        self.detail = detail
        super().__init__(source, detail)


class ModelUnavailable(ReviewBriefError):
    """The completion backend failed after its own retries."""


def describe(error: ReviewBriefError) -> str:
    """One console line for an error, prefixed like every other status line."""
    if isinstance(error, ConfigurationMissing):
        return f"[ReviewBrief] ⚠️ Please set {', '.join(error.missing)} to use {error.source}"
    if isinstance(error, NotFound):
        return f"[ReviewBrief] 🤷 {error}"
    if isinstance(error, ModelUnavailable):
        return f"[ReviewBrief] 🔌 Model unavailable: {error}"
    return f"[ReviewBrief] ❌ {error}"
