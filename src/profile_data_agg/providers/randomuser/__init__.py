"""Random-user generator provider and DTOs."""
from profile_data_agg.providers.randomuser.random_user_provider import \
    RandomUserProvider

__all__ = ["RandomUserProvider"]
