"""Random user route."""
from fastapi import APIRouter

from profile_data_agg.deps import UserServiceDep
from profile_data_agg.schemas import ErrorBody, UserRecord

router = APIRouter(prefix="/api", tags=["user"])


@router.get(
    "/user",
    response_model=UserRecord,
    responses={500: {"model": ErrorBody}},
)
async def get_user(service: UserServiceDep) -> UserRecord:
    """Get a random user profile.

    Returns:
        Flattened user record (name, age, location, portrait URL).
    """
    return await service.get_user()
