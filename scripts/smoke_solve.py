"""
Live smoke test against LeetCode and Gemini - NO FastAPI server needed!

Usage: python scripts/smoke_solve.py [slug] [language]
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project root to Python path (BEFORE importing algo_solver)
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from algo_solver.config import get_settings
from algo_solver.models import SolveRequest
from algo_solver.solver import SolveService
from algo_solver.utils.http import build_http_client


async def smoke(slug: str, language: str) -> int:
    settings = get_settings()
    print("=" * 60)
    print("🧪 AlgoSolver smoke test")
    print("=" * 60)
    print(f"Slug: {slug}")
    print(f"Language: {language}")
    print(f"Model: {settings.gemini_model}")
    print(f"Gemini key set: {settings.gemini_configured}")
    print("=" * 60 + "\n")

    client = build_http_client(settings)
    try:
        service = SolveService(settings, client)
        response = await service.solve(
            SolveRequest(platform="leetcode", slug=slug, language=language)
        )
    finally:
        await client.aclose()

    if response.error:
        print(f"❌ ERROR: {response.error}\n")
        return 1

    print("✅ SUCCESS!\n")
    print(json.dumps(response.model_dump(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    slug = sys.argv[1] if len(sys.argv) > 1 else "two-sum"
    language = sys.argv[2] if len(sys.argv) > 2 else "Python"
    sys.exit(asyncio.run(smoke(slug, language)))
