"""Auth provider for local development: a fixed, configured user."""

from __future__ import annotations

from storefront.domain.repository.auth_provider import AuthProvider


class StaticAuthProvider(AuthProvider):

    def __init__(self, user_id: str | None) -> None:
        self._user_id = user_id or None

    async def current_user_id(self) -> str | None:
        return self._user_id
