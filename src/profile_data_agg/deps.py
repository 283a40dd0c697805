"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

No external DI container. Lifespan (main.py) creates providers and services once
and attaches them to app.state; these getters are used by Depends().
"""
from typing import Annotated

from fastapi import Depends, Request

from profile_data_agg.services import (CountryService, ExchangeService,
                                       NewsService, ProfileServices,
                                       UserService)


def get_profile_services(request: Request) -> ProfileServices:
    """Resolve the ProfileServices bundle from app.state (created at startup)."""
    return request.app.state.services


def get_user_service(request: Request) -> UserService:
    """Resolve the UserService from app.state."""
    return get_profile_services(request).user


def get_country_service(request: Request) -> CountryService:
    """Resolve the CountryService from app.state."""
    return get_profile_services(request).country


def get_exchange_service(request: Request) -> ExchangeService:
    """Resolve the ExchangeService from app.state."""
    return get_profile_services(request).exchange


def get_news_service(request: Request) -> NewsService:
    """Resolve the NewsService from app.state."""
    return get_profile_services(request).news


# Type aliases for route injection
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CountryServiceDep = Annotated[CountryService, Depends(get_country_service)]
ExchangeServiceDep = Annotated[ExchangeService, Depends(get_exchange_service)]
NewsServiceDep = Annotated[NewsService, Depends(get_news_service)]
