"""Bearer token authentication backed by DRF auth tokens."""

from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """Accept ``Authorization: Bearer <key>``; each token is a user session."""

    keyword = "Bearer"
