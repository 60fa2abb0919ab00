from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from algo_solver.config import Settings
from algo_solver.llm.prompts import solution_prompt
from algo_solver.logger import setup_logger
from algo_solver.models import ProblemData
from algo_solver.utils.exceptions import ConfigurationError, GenerationError
from algo_solver.utils.helpers import truncate
from algo_solver.utils.http import describe_error

logger = setup_logger(__name__)

MISSING_API_KEY = "GEMINI_API_KEY environment variable is not set."


class GenerationStatus(enum.Enum):
    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class GenerationResult:
    status: GenerationStatus
    text: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, text: str) -> "GenerationResult":
        return cls(GenerationStatus.OK, text=text)

    @classmethod
    def failed(cls, error: str) -> "GenerationResult":
        return cls(GenerationStatus.FAILED, error=error)


def extract_candidate_text(data: Any) -> str:
    """
    Pull `candidates[0].content.parts[0].text` out of a Gemini response.

    Raises:
        GenerationError: if any level of the path is missing or has the wrong type
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise GenerationError(
            f"Malformed Gemini response: no candidates[0].content.parts[0].text ({e!r})"
        )
    if not isinstance(text, str):
        raise GenerationError(
            f"Malformed Gemini response: text is {type(text).__name__}, expected str"
        )
    return text


class SolutionGenerator:
    """
    Asks Gemini to write a solution for a problem.

    Single synchronous generateContent call with the API key passed as the
    `key` query parameter. No retries, no streaming.
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        self.settings = settings
        self._client = client

    @property
    def configured(self) -> bool:
        return self.settings.gemini_configured

    async def generate(self, problem: ProblemData, language: str) -> GenerationResult:
        """
        Generate raw solution text.

        Args:
            problem: Fetched problem statement
            language: Target programming language name

        Returns:
            GenerationResult with the model's raw text, or FAILED with a message
        """
        try:
            text = await self._call_gemini(problem, language)
        except ConfigurationError as e:
            logger.warning(f"⚠️ Gemini not configured: {e}")
            return GenerationResult.failed(str(e))
        except GenerationError as e:
            logger.warning(
                f"⚠️ {e.service} generation failed (status={e.status_code}): {truncate(str(e))}"
            )
            return GenerationResult.failed(str(e))
        except httpx.HTTPError as e:
            logger.warning(f"⚠️ Gemini request error: {describe_error(e)}")
            return GenerationResult.failed(f"Gemini request failed: {describe_error(e)}")

        logger.info(f"✅ Gemini returned {len(text)} chars of {language}")
        return GenerationResult.ok(text)

    def _build_body(self, prompt: str) -> Dict[str, Any]:
        return {"contents": [{"parts": [{"text": prompt}]}]}

    async def _call_gemini(self, problem: ProblemData, language: str) -> str:
        if not self.configured:
            raise ConfigurationError(MISSING_API_KEY)

        prompt = solution_prompt(language, problem.content, problem.sample_test_case)

        logger.debug(f"📤 Sending {len(prompt)} char prompt to {self.settings.gemini_model}")
        resp = await self._client.post(
            self.settings.gemini_generate_url,
            params={"key": self.settings.gemini_api_key},
            headers={"Content-Type": "application/json"},
            json=self._build_body(prompt),
        )

        if resp.status_code != 200:
            raise GenerationError(
                f"Gemini API failed with status: {resp.status_code} Body: {resp.text}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise GenerationError(f"Gemini returned invalid JSON: {e}")

        return extract_candidate_text(data)
