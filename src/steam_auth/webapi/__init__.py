"""Steam Web API clients."""
