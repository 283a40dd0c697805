"""Profile data aggregator: random user, country, exchange rate and news lookups."""
