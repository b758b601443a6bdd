"""Session resolution from JWT cookies."""

import logfire

from discuss.config import AuthSettings
from discuss.domain.service import SessionResolver
from discuss.domain.value import RequestContext, UserId
from discuss.util.jwt import JWTError, verify_token


class JWTSessionResolver(SessionResolver):
    """Reads the caller's id and roles from a signed session token."""

    def __init__(self, settings: AuthSettings) -> None:
        self.settings = settings

    def anonymous(self) -> RequestContext:
        """Context for a caller without a session."""
        return RequestContext(
            user_id=UserId(self.settings.anonymous_user_id),
            roles=("anonymous",),
        )

    def resolve(self, token: str | None) -> RequestContext:
        if not token:
            return self.anonymous()

        try:
            payload = verify_token(token, self.settings)
        except JWTError as e:
            logfire.debug("Session token rejected, treating as anonymous", error=str(e))
            return self.anonymous()

        return RequestContext(
            user_id=UserId(payload.user_id),
            roles=tuple(payload.roles) or ("authenticated",),
        )
