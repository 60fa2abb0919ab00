"""
Solve orchestration.
Validates the request, fetches the problem, generates and cleans the code.
"""

from __future__ import annotations

from typing import Optional

import httpx

from algo_solver.config import Settings
from algo_solver.leetcode.client import FetchStatus, ProblemFetcher
from algo_solver.llm.client import GenerationStatus, SolutionGenerator
from algo_solver.logger import setup_logger
from algo_solver.models import SolveRequest, SolveResponse
from algo_solver.timer import StageTimer
from algo_solver.utils.helpers import clean_code_response
from algo_solver.validation import validate_request

logger = setup_logger(__name__)


def internal_error(message: str) -> SolveResponse:
    return SolveResponse.failure(f"Internal Server Error: {message}")


def not_found(slug: str) -> SolveResponse:
    return SolveResponse.failure(f"Could not find problem with slug: {slug}")


class SolveService:
    """
    Runs one solve request end to end.

    Stages run strictly in order and each upstream is called at most once:
    validate -> fetch from LeetCode -> generate with Gemini -> clean.
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient,
        fetcher: Optional[ProblemFetcher] = None,
        generator: Optional[SolutionGenerator] = None,
    ) -> None:
        self.settings = settings
        self.fetcher = fetcher or ProblemFetcher(settings, client)
        self.generator = generator or SolutionGenerator(settings, client)

    async def solve(self, request: SolveRequest) -> SolveResponse:
        """
        Produce solution code for a LeetCode problem.

        Args:
            request: SolveRequest with platform, slug and language

        Returns:
            SolveResponse with either `code` or `error` set
        """
        rejected = validate_request(request, self.settings)
        if rejected is not None:
            logger.info(f"🚫 Rejected request: {rejected.error}")
            return rejected

        logger.info(f"🎯 Solving '{request.slug}' in {request.language}")
        timer = StageTimer()
        timer.start()

        try:
            response = await self._run(request, timer)
        except Exception as e:
            logger.error(f"🔥 Unexpected error solving '{request.slug}': {e}", exc_info=True)
            return internal_error(str(e))

        logger.info(f"⏱️  '{request.slug}' finished in {timer.elapsed():.2f}s")
        return response

    async def _run(self, request: SolveRequest, timer: StageTimer) -> SolveResponse:
        fetched = await self.fetcher.fetch(request.slug)
        logger.debug(f"LeetCode stage took {timer.lap():.2f}s")

        if fetched.status is FetchStatus.NOT_FOUND:
            return not_found(request.slug)
        if fetched.status is FetchStatus.FAILED:
            return internal_error(fetched.error)

        generated = await self.generator.generate(fetched.problem, request.language)
        logger.debug(f"Gemini stage took {timer.lap():.2f}s")

        if generated.status is GenerationStatus.FAILED:
            return internal_error(generated.error)

        return SolveResponse.success(clean_code_response(generated.text))
