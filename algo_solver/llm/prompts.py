from __future__ import annotations

from textwrap import dedent


def solution_prompt(language: str, content: str, sample_test_case: str) -> str:
    return dedent(
        """
        You are an expert software engineer.
        Task: Write a {language} solution for the following LeetCode problem.
        Problem Description (HTML): {content}
        Sample Test Case: {sample_test_case}

        Requirements:
        1. Return ONLY the raw code.
        2. Do not wrap in markdown blocks (no ```).
        3. Do not include explanations, just the solution class/function.
        4. Ensure it handles the sample test case.
        """
    ).strip().format(
        language=language,
        content=content,
        sample_test_case=sample_test_case,
    )
