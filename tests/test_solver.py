import pytest

from algo_solver.models import SolveRequest
from algo_solver.solver import SolveService


def make_request(platform="leetcode", slug="two-sum", language="Python"):
    return SolveRequest(platform=platform, slug=slug, language=language)


async def solve(settings, upstreams, request):
    async with upstreams.client() as client:
        return await SolveService(settings, client).solve(request)


async def test_success_returns_cleaned_code(settings, upstreams):
    upstreams.gemini = upstreams.reply(
        200, upstreams.gemini_body("```python\nclass Solution:\n    pass\n```\n")
    )

    response = await solve(settings, upstreams, make_request())

    assert response.code == "class Solution:\n    pass"
    assert response.error is None
    assert len(upstreams.leetcode_calls) == 1
    assert len(upstreams.gemini_calls) == 1


async def test_fetch_happens_before_generation(settings, upstreams):
    await solve(settings, upstreams, make_request())

    hosts = [call.url.host for call in upstreams.calls]
    assert hosts == ["leetcode.com", "generativelanguage.googleapis.com"]


@pytest.mark.parametrize("platform", ["codeforces", "hackerrank"])
async def test_unsupported_platform_makes_no_calls(settings, upstreams, platform):
    response = await solve(settings, upstreams, make_request(platform=platform))

    assert response.error == "Only 'leetcode' platform is currently supported."
    assert response.code is None
    assert upstreams.calls == []


@pytest.mark.parametrize("slug", ["", "  "])
async def test_blank_slug_makes_no_calls(settings, upstreams, slug):
    response = await solve(settings, upstreams, make_request(slug=slug))

    assert response.error == "Problem slug is required."
    assert upstreams.calls == []


async def test_not_found(settings, upstreams):
    upstreams.leetcode = upstreams.reply(200, {"data": {"question": None}})

    response = await solve(settings, upstreams, make_request(slug="no-such-problem"))

    assert response.error == "Could not find problem with slug: no-such-problem"
    assert response.code is None
    assert upstreams.gemini_calls == []


async def test_leetcode_500_is_internal_error(settings, upstreams):
    upstreams.leetcode = upstreams.reply(500, text="down")

    response = await solve(settings, upstreams, make_request())

    assert response.error.startswith("Internal Server Error:")
    assert "500" in response.error
    assert response.code is None
    assert upstreams.gemini_calls == []


async def test_missing_credential_fetches_but_skips_generation(unconfigured_settings, upstreams):
    response = await solve(unconfigured_settings, upstreams, make_request())

    assert response.error == (
        "Internal Server Error: GEMINI_API_KEY environment variable is not set."
    )
    assert "not set" in response.error
    assert len(upstreams.leetcode_calls) == 1
    assert upstreams.gemini_calls == []


async def test_gemini_error_is_internal_error(settings, upstreams):
    upstreams.gemini = upstreams.reply(503, text="overloaded")

    response = await solve(settings, upstreams, make_request())

    assert response.error == (
        "Internal Server Error: Gemini API failed with status: 503 Body: overloaded"
    )
    assert response.code is None


async def test_malformed_gemini_response_is_not_empty_code(settings, upstreams):
    upstreams.gemini = upstreams.reply(200, {"candidates": []})

    response = await solve(settings, upstreams, make_request())

    assert response.code is None
    assert response.error.startswith("Internal Server Error: Malformed Gemini response")


async def test_unexpected_exception_is_internal_error(settings, upstreams):
    class ExplodingFetcher:
        async def fetch(self, slug):
            raise RuntimeError("kaboom")

    async with upstreams.client() as client:
        service = SolveService(settings, client, fetcher=ExplodingFetcher())
        response = await service.solve(make_request())

    assert response.error == "Internal Server Error: kaboom"
    assert response.code is None


async def test_language_reaches_prompt(settings, upstreams):
    await solve(settings, upstreams, make_request(language="Rust"))

    [call] = upstreams.gemini_calls
    assert b"Write a Rust solution" in call.content
