"""Service layer: provider orchestration and exception-to-ApiError mapping."""
from profile_data_agg.services.country_service import CountryService
from profile_data_agg.services.exchange_service import ExchangeService
from profile_data_agg.services.news_service import NewsService
from profile_data_agg.services.service_factory import (ProfileServices,
                                                       create_profile_services)
from profile_data_agg.services.user_service import UserService

__all__ = [
    "CountryService",
    "ExchangeService",
    "NewsService",
    "ProfileServices",
    "UserService",
    "create_profile_services",
]
