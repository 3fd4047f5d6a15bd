# src/focus_matrix/llm/errors.py

from __future__ import annotations


class SummaryError(Exception):
    """Base class for every failure of the summary flow."""


class MissingCredential(SummaryError):
    def __init__(self) -> None:
        super().__init__("LLM API key is not set.")


class InvalidEndpoint(SummaryError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid LLM endpoint: {url!r}")
        self.url = url


class TransportFailure(SummaryError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"LLM request failed: {cause.__class__.__name__}: {cause}")
        self.cause = cause


class InvalidResponse(SummaryError):
    def __init__(self, status_code: int | None = None) -> None:
        detail = f"HTTP {status_code}" if status_code is not None else "unknown status"
        super().__init__(f"LLM returned an invalid response ({detail}).")
        self.status_code = status_code


class NoContent(SummaryError):
    def __init__(self) -> None:
        super().__init__("LLM returned no choices.")


class DecodingFailure(SummaryError):
    def __init__(self, cause: BaseException | str) -> None:
        super().__init__(f"Could not decode LLM response: {cause}")
        self.cause = cause


def friendly_summary_error_message(err: BaseException) -> str:
    if isinstance(err, MissingCredential):
        return "AI insights are not configured (missing API key). Add it to your credentials file."
    if isinstance(err, InvalidEndpoint):
        return "AI insights are misconfigured (invalid endpoint URL)."
    if isinstance(err, TransportFailure):
        return "Could not reach the AI service. Check your connection and try again."
    if isinstance(err, InvalidResponse):
        if err.status_code in (401, 403):
            return "The AI service rejected the API key."
        if err.status_code == 429:
            return "The AI service is rate-limited. Try again later."
        if err.status_code is not None:
            return f"The AI service returned an error (HTTP {err.status_code})."
        return "The AI service returned an error."
    if isinstance(err, NoContent):
        return "The AI service returned an empty answer."
    if isinstance(err, DecodingFailure):
        return "The AI service returned an unreadable answer."
    return "An error occurred while generating the summary."
