from __future__ import annotations

import enum
from dataclasses import dataclass
from textwrap import dedent
from typing import Any, Dict, Optional

import httpx

from algo_solver.config import Settings
from algo_solver.logger import setup_logger
from algo_solver.models import ProblemData
from algo_solver.utils.exceptions import ProblemFetchError
from algo_solver.utils.http import describe_error

logger = setup_logger(__name__)

QUESTION_QUERY = dedent(
    """
    query questionData($titleSlug: String!) {
      question(titleSlug: $titleSlug) {
        content
        sampleTestCase
      }
    }
    """
).strip()


class FetchStatus(enum.Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult:
    status: FetchStatus
    problem: Optional[ProblemData] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, problem: ProblemData) -> "FetchResult":
        return cls(FetchStatus.FOUND, problem=problem)

    @classmethod
    def not_found(cls) -> "FetchResult":
        return cls(FetchStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: str) -> "FetchResult":
        return cls(FetchStatus.FAILED, error=error)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class ProblemFetcher:
    """
    Fetches a problem statement from LeetCode's GraphQL API.

    One POST per call, no retries. LeetCode rejects requests without a
    browser-like User-Agent, so one is always sent.
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        self.settings = settings
        self._client = client

    async def fetch(self, slug: str) -> FetchResult:
        """
        Look up a problem by slug.

        Args:
            slug: LeetCode title slug, e.g. "two-sum"

        Returns:
            FetchResult that is FOUND (with ProblemData), NOT_FOUND or FAILED
        """
        try:
            problem = await self._query_question(slug)
        except ProblemFetchError as e:
            logger.warning(
                f"⚠️ {e.service} fetch failed for '{slug}' (status={e.status_code}): {e}"
            )
            return FetchResult.failed(str(e))
        except httpx.HTTPError as e:
            logger.warning(f"⚠️ LeetCode request error for '{slug}': {describe_error(e)}")
            return FetchResult.failed(f"LeetCode request failed: {describe_error(e)}")

        if problem is None:
            logger.info(f"🔍 No LeetCode question for slug '{slug}'")
            return FetchResult.not_found()

        logger.info(
            f"✅ Fetched '{slug}': {len(problem.content)} chars of content, "
            f"{len(problem.sample_test_case)} chars of sample test case"
        )
        return FetchResult.found(problem)

    def _build_payload(self, slug: str) -> Dict[str, Any]:
        return {"query": QUESTION_QUERY, "variables": {"titleSlug": slug}}

    async def _query_question(self, slug: str) -> Optional[ProblemData]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.settings.user_agent,
        }

        logger.debug(f"📤 Querying LeetCode for '{slug}'")
        resp = await self._client.post(
            self.settings.leetcode_graphql_url,
            json=self._build_payload(slug),
            headers=headers,
        )

        if resp.status_code != 200:
            raise ProblemFetchError(
                f"LeetCode API failed with status: {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            root = resp.json()
        except ValueError as e:
            raise ProblemFetchError(f"LeetCode returned invalid JSON: {e}")

        data = root.get("data") if isinstance(root, dict) else None
        question = data.get("question") if isinstance(data, dict) else None
        if question is None:
            return None
        if not isinstance(question, dict):
            raise ProblemFetchError(
                f"Malformed LeetCode response: 'data.question' is {type(question).__name__}"
            )

        return ProblemData(
            content=_as_text(question.get("content")),
            sample_test_case=_as_text(question.get("sampleTestCase")),
        )
