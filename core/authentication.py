import logging
import re

from rest_framework.authentication import BaseAuthentication, get_authorization_header

from users import services as auth_service
from .exceptions import AuthHeaderError

logger = logging.getLogger(__name__)

BEARER_RE = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)


class BearerTokenAuthentication(BaseAuthentication):
    """
    Resolves ``Authorization: Bearer <token>`` to a user.

    Only attach this to owner-scoped views: a missing or malformed header is
    rejected here (401) instead of falling through to an anonymous request.
    Tokens that fail verification raise InvalidTokenError (403).
    """

    www_authenticate_realm = "api"

    def authenticate(self, request):
        header = get_authorization_header(request).decode("latin-1").strip()
        match = BEARER_RE.match(header)
        if not match:
            logger.debug(
                "Missing or malformed Authorization header on %s %s",
                request.method,
                request.path,
            )
            raise AuthHeaderError()

        token = match.group(1).strip()
        return auth_service.resolve_token(token), token

    def authenticate_header(self, request):
        return f'Bearer realm="{self.www_authenticate_realm}"'
