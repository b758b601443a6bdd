"""Request session resolution."""

from discuss.domain.value import RequestContext


class SessionResolver:
    """Resolves the caller of a request into a request context."""

    def resolve(self, token: str | None) -> RequestContext:
        """Resolve a session token.

        Args:
            token: Session token from the request, if any

        Returns:
            Context for the caller; anonymous when the token is missing or invalid
        """
        raise NotImplementedError
