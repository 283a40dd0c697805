"""API routers for the profile dashboard.

Includes routes for:
- /api/user - Random user profile (randomuser.me)
- /api/country/{country} - Country metadata (REST Countries)
- /api/exchange/{currency} - USD/KZT exchange rates (ExchangeRate-API)
- /api/news/{country} - Country headlines (NewsAPI)
"""
from profile_data_agg.routers.country import router as country_router
from profile_data_agg.routers.exchange import router as exchange_router
from profile_data_agg.routers.news import router as news_router
from profile_data_agg.routers.user import router as user_router

__all__ = [
    "country_router",
    "exchange_router",
    "news_router",
    "user_router",
]
