"""Random-user generator provider."""
import httpx

from profile_data_agg.providers.core import (NOT_AVAILABLE,
                                             UnexpectedPayloadError,
                                             UpstreamProviderABC,
                                             format_long_date, or_na)
from profile_data_agg.providers.randomuser.models import (RandomUserParams,
                                                          RandomUserResponse,
                                                          RandomUserResult)
from profile_data_agg.schemas import UserRecord


class RandomUserProvider(UpstreamProviderABC):
    """Fetches a single random user from randomuser.me and flattens it."""

    BASE_URL = "https://randomuser.me/api/"

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url or self.BASE_URL, timeout=timeout, transport=transport)

    @property
    def api_name(self) -> str:
        return "Random User"

    async def get_user(self) -> UserRecord:
        """Fetch one random user.

        Returns:
            UserRecord with "N/A" for any field the upstream left out.

        Raises:
            UnexpectedPayloadError: The body has no results.
        """
        data = await self._get_json("", params=RandomUserParams().model_dump())
        payload = RandomUserResponse.model_validate(data)
        if not payload.results:
            raise UnexpectedPayloadError("Random user API returned no results")
        return self._user_from_result(payload.results[0])

    def _user_from_result(self, user: RandomUserResult) -> UserRecord:
        """Build a UserRecord from a ``results[0]`` entry."""
        street = user.location.street
        city = or_na(user.location.city)
        country = or_na(user.location.country)
        if street.number is not None and street.name:
            address = f"{street.number}, {street.name}"
            full_address = f"{street.number} {street.name}, {city}, {country}"
        else:
            address = NOT_AVAILABLE
            full_address = NOT_AVAILABLE
        picture = or_na(user.picture.large)
        return UserRecord(
            first_name=or_na(user.name.first),
            last_name=or_na(user.name.last),
            gender=or_na(user.gender),
            age=or_na(user.dob.age),
            dob=or_na(user.dob.date),
            date_of_birth=format_long_date(user.dob.date),
            city=city,
            country=country,
            address=address,
            full_address=full_address,
            profile_picture=picture,
            image=picture,
        )
