from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class SolveRequest(BaseModel):
    """Request body for POST /api/solve."""

    model_config = ConfigDict(frozen=True)

    platform: str
    slug: str
    language: str


class SolveResponse(BaseModel):
    """
    Response body for POST /api/solve.

    Exactly one of `code` and `error` is set.
    """

    code: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one_field(self) -> "SolveResponse":
        if (self.code is None) == (self.error is None):
            raise ValueError("SolveResponse needs exactly one of 'code' or 'error'")
        return self

    @classmethod
    def success(cls, code: str) -> "SolveResponse":
        return cls(code=code)

    @classmethod
    def failure(cls, error: str) -> "SolveResponse":
        return cls(error=error)


class HealthResponse(BaseModel):
    """Response body for GET /health."""

    status: str
    platform: str
    llm_model: str
    llm_configured: bool


@dataclass(frozen=True)
class ProblemData:
    """Problem statement as returned by the judge platform."""

    content: str
    sample_test_case: str
