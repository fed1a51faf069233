"""Optional apikey header check for the summarize routes."""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Security
from fastapi.security import APIKeyHeader

from text_summarizer.core.config import Settings, get_settings
from text_summarizer.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

apikey_header = APIKeyHeader(name="apikey", auto_error=False)


async def require_client_key(
    supplied: Annotated[Optional[str], Security(apikey_header)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Optional[str]:
    """Accept the request when auth is off or the apikey header is a configured key.

    Raises:
        AuthenticationError: Auth is on and the header is missing or unknown.
    """
    if not settings.require_api_key:
        return None

    if supplied is None:
        reason = "Missing API key. Include apikey header."
    elif supplied not in settings.api_keys:
        reason = "Invalid API key"
    else:
        return supplied

    logger.warning(f"Rejected request: {reason}")
    raise AuthenticationError(reason)


ClientKeyDep = Annotated[Optional[str], Depends(require_client_key)]
