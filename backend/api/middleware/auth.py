"""
Bearer token extraction.

The token is handed to the identity provider as-is; deciding whether
it is a valid session is the session resolver's job, so a bad or
missing token never fails the request here.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """
    Dependency returning the raw bearer token, or None.

    Usage:
        @router.get("/bootstrap")
        async def bootstrap(token: Optional[str] = Depends(get_access_token)):
            ...
    """
    if credentials is None:
        return None
    return credentials.credentials
