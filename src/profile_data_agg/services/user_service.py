"""User service: random user lookup with unified error mapping."""
from profile_data_agg.providers import RandomUserProvider
from profile_data_agg.providers.core import ProviderErrorMapper
from profile_data_agg.schemas import UserRecord
from profile_data_agg.services.errors import PROVIDER_EXCEPTIONS, USER_ERRORS


class UserService:
    """Thin service over the random-user provider; maps provider errors to ApiError."""

    def __init__(
        self,
        provider: RandomUserProvider,
        error_mapper: ProviderErrorMapper = USER_ERRORS,
    ) -> None:
        self._provider = provider
        self._error_mapper = error_mapper

    async def get_user(self) -> UserRecord:
        """Get one random user. Raises ApiError on provider errors."""
        try:
            return await self._provider.get_user()
        except PROVIDER_EXCEPTIONS as e:
            self._error_mapper.raise_api_error(e)
