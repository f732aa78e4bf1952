"""EmailProvider protocol — services depend on this, not the concrete implementation."""

from typing import Protocol


class EmailProvider(Protocol):
    @property
    def is_configured(self) -> bool: ...

    async def send_login_code(self, email: str, code: str, expiry_minutes: int) -> bool: ...
