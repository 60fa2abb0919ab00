"""Custom exceptions for the solver service."""

from typing import Optional


class AlgoSolverError(Exception):
    """Base exception for solver errors."""

    pass


class ConfigurationError(AlgoSolverError):
    """Required configuration (e.g. an API key) is missing."""

    pass


class UpstreamError(AlgoSolverError):
    """An external service answered badly or could not be reached."""

    def __init__(
        self,
        service: str,
        message: str,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.service = service
        self.status_code = status_code


class ProblemFetchError(UpstreamError):
    """LeetCode GraphQL errors."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__("leetcode", message, **kwargs)


class GenerationError(UpstreamError):
    """Gemini generation errors."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__("gemini", message, **kwargs)
