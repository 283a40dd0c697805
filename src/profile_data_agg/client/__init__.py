"""Presentation client: fetch chain and HTML cards."""
from profile_data_agg.client.dashboard import (ChainError, Dashboard,
                                               DashboardClient)
from profile_data_agg.client.render import (load_and_render, render_dashboard,
                                            render_error)

__all__ = [
    "ChainError",
    "Dashboard",
    "DashboardClient",
    "load_and_render",
    "render_dashboard",
    "render_error",
]
