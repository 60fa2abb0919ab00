"""
Request validation, run before any outbound call is made.
"""

from typing import Optional

from algo_solver.config import Settings
from algo_solver.models import SolveRequest, SolveResponse

SLUG_REQUIRED = "Problem slug is required."


def unsupported_platform_message(platform: str) -> str:
    return f"Only '{platform}' platform is currently supported."


def validate_request(request: SolveRequest, settings: Settings) -> Optional[SolveResponse]:
    """
    Check the platform and slug of an incoming request.

    Args:
        request: Incoming solve request
        settings: Service settings (provides the supported platform)

    Returns:
        None if the request is valid, otherwise the error response to send back
    """
    supported = settings.supported_platform
    if request.platform.lower() != supported.lower():
        return SolveResponse.failure(unsupported_platform_message(supported))

    if not request.slug.strip():
        return SolveResponse.failure(SLUG_REQUIRED)

    return None
