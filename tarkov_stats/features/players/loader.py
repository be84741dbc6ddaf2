"""Profile loading with observable loading/error/result state."""

from typing import Optional

import structlog

from tarkov_stats.core.tarkov_api.errors import TarkovAPIError
from tarkov_stats.core.tarkov_api.models import PlayerProfile
from .gateway import PlayerGateway

logger = structlog.get_logger(__name__)


class ProfileLoader:
    """Loads one profile at a time for a single consumer.

    Each call to :meth:`load` supersedes the previous one: only the most
    recently started load may update ``loading``, ``error`` and ``result``.
    A failed load keeps the previously loaded profile in ``result``.
    """

    def __init__(self, gateway: PlayerGateway):
        """
        Initialize the loader.

        :param gateway: Source of profile documents
        """
        self._gateway = gateway
        self._generation = 0
        self.loading: bool = False
        self.error: Optional[str] = None
        self.result: Optional[PlayerProfile] = None
        self.account_id: Optional[str] = None

    async def load(self, account_id: str) -> PlayerProfile:
        """
        Fetch a profile and publish it if no newer load has started since.

        :param account_id: Numeric account id
        :returns: The fetched profile, even when superseded
        :raises InvalidRequestError: If the id is not numeric
        :raises PlayerNotFoundError: If the account does not exist
        :raises NetworkError: If the request fails
        :raises DecodingError: If the document is malformed
        """
        self._generation += 1
        token = self._generation
        self.loading = True
        self.error = None
        logger.info("Loading player profile", account_id=account_id, token=token)

        try:
            profile = await self._gateway.fetch_profile(account_id)
        except TarkovAPIError as e:
            if token == self._generation:
                self.error = str(e)
                logger.warning(
                    "Player profile load failed",
                    account_id=account_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
            else:
                logger.debug(
                    "Ignoring superseded profile failure", account_id=account_id
                )
            raise
        finally:
            # Also reached on cancellation and non-API errors.
            if token == self._generation:
                self.loading = False

        if token == self._generation:
            self.result = profile
            self.account_id = account_id
            logger.info(
                "Player profile loaded",
                account_id=account_id,
                nickname=profile.info.nickname,
            )
        else:
            logger.debug("Ignoring superseded profile", account_id=account_id)
        return profile

    def clear(self) -> None:
        """Forget the displayed profile and ignore any load still running."""
        self._generation += 1
        self.loading = False
        self.error = None
        self.result = None
        self.account_id = None
