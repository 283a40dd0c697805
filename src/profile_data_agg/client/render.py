"""HTML rendering for the dashboard cards and the error panel.

All interpolated values are HTML-escaped; records never contain null where a
sentinel is expected, so no per-field null handling is needed here.
"""
from html import escape

from profile_data_agg.client.dashboard import (ChainError, Dashboard,
                                               DashboardClient, wants_exchange)
from profile_data_agg.schemas import (CountryRecord, ExchangeRecord, NewsItem,
                                      UserRecord)

NO_EXCHANGE_MESSAGE = "Exchange rates not available for this currency"
NO_NEWS_MESSAGE = "No news articles available at the moment."


def render_user_card(user: UserRecord) -> str:
    full_name = escape(f"{user.first_name} {user.last_name}")
    return f"""
<div class="card user-profile">
  <h2>User Profile</h2>
  <img src="{escape(user.image)}" alt="{full_name}">
  <div class="user-info">
    <p><strong>Name:</strong> {full_name}</p>
    <p><strong>Gender:</strong> {escape(user.gender)}</p>
    <p><strong>Age:</strong> {escape(str(user.age))} years old</p>
    <p><strong>Date of Birth:</strong> {escape(user.date_of_birth)}</p>
    <p><strong>City:</strong> {escape(user.city)}</p>
    <p><strong>Country:</strong> {escape(user.country)}</p>
    <p><strong>Address:</strong> {escape(user.address)}</p>
  </div>
</div>"""


def render_exchange_block(country: CountryRecord, exchange: ExchangeRecord) -> str:
    """Exchange rates for the country's currency, or the "not available" note."""
    if not wants_exchange(country):
        return f'<p class="error">{NO_EXCHANGE_MESSAGE}</p>'
    currency = escape(country.currency)
    return f"""
    <div class="exchange-rates">
      <h4>Exchange Rates</h4>
      <p>1 {currency} = {escape(exchange.usd)} USD</p>
      <p>1 {currency} = {escape(exchange.kzt)} KZT</p>
    </div>"""


def render_country_card(country: CountryRecord, exchange: ExchangeRecord) -> str:
    name = escape(country.name)
    return f"""
<div class="card">
  <h2>Country Information</h2>
  <div class="country-info">
    <div class="country-flag">
      <img src="{escape(country.flag)}" alt="{name} flag">
      <h3>{name}</h3>
    </div>
    <div class="country-details">
      <p><strong>Capital:</strong> {escape(country.capital)}</p>
      <p><strong>Languages:</strong> {escape(country.languages)}</p>
      <p><strong>Currency:</strong> {escape(country.currency)}</p>
      {render_exchange_block(country, exchange)}
    </div>
  </div>
</div>"""


def render_news_item(item: NewsItem) -> str:
    image = f'<img src="{escape(item.image)}" alt="News image">' if item.image else ""
    return f"""
    <div class="news-item">
      <h4>{escape(item.title)}</h4>
      {image}
      <p>{escape(item.description)}</p>
      <a href="{escape(item.url)}" target="_blank" rel="noopener noreferrer">Read Full Article →</a>
    </div>"""


def render_news_card(country_name: str, news: list[NewsItem]) -> str:
    if news:
        items = "".join(render_news_item(item) for item in news)
    else:
        items = f'<p class="error">{NO_NEWS_MESSAGE}</p>'
    return f"""
<div class="card">
  <h2>Latest News from {escape(country_name)}</h2>
  <div class="news-section">{items}
  </div>
</div>"""


def render_dashboard(dashboard: Dashboard) -> str:
    """Render the profile, country + exchange, and news cards."""
    return "".join(
        (
            render_user_card(dashboard.user),
            render_country_card(dashboard.country, dashboard.exchange),
            render_news_card(dashboard.user.country, dashboard.news),
        )
    )


def render_error(message: str) -> str:
    """Render the single error panel shown when the chain aborts."""
    return f"""
<div class="card">
  <div class="error">
    <h3>⚠️ Error Loading Data</h3>
    <p>{escape(message)}</p>
    <p>Please try again later.</p>
  </div>
</div>"""


async def load_and_render(client: DashboardClient) -> str:
    """Run the chain once and return either the three cards or the error panel."""
    try:
        dashboard = await client.load_dashboard()
    except ChainError as e:
        return render_error(e.message)
    return render_dashboard(dashboard)
