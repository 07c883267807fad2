"""
USD prices from CoinGecko.
"""
import logging
from typing import Iterable, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import PriceFetchError
from .models import CoinMarket, DEFAULT_PRICE_IDS, PriceQuote
from .rate_limiter import RateLimiter

_markets_adapter = TypeAdapter(list[CoinMarket])


class PriceClient:
    def __init__(
        self,
        api_url: str,
        http_client: httpx.AsyncClient,
        limiter: RateLimiter,
        vs_currency: str = "usd",
        logger: Optional[logging.Logger] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.http_client = http_client
        self.limiter = limiter
        self.vs_currency = vs_currency
        self.logger = logger or logging.getLogger(__name__)

    async def get_prices(self, ids: Iterable[str] = DEFAULT_PRICE_IDS) -> PriceQuote:
        """
        Get current prices for a batch of CoinGecko asset ids.

        The batch is all-or-nothing: if the request fails or any requested id
        comes back without a price, nothing is returned.

        Args:
            ids: CoinGecko asset ids (e.g. "solana", "bitcoin")

        Returns:
            Dict mapping id to price in `vs_currency`
        """
        wanted = sorted(set(ids))
        if not wanted:
            return {}

        try:
            response = await self.limiter.schedule(
                self.http_client.get,
                f"{self.api_url}/coins/markets",
                params={"vs_currency": self.vs_currency, "ids": ",".join(wanted)},
            )
        except httpx.HTTPError as e:
            self.logger.error(f"Error fetching crypto prices: {e}")
            raise PriceFetchError() from e

        if response.status_code != 200:
            self.logger.error(f"CoinGecko markets API error: {response.status_code}")
            raise PriceFetchError()

        try:
            markets = _markets_adapter.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            self.logger.error(f"Invalid CoinGecko markets payload: {e}")
            raise PriceFetchError() from e

        prices = {m.id: m.current_price for m in markets if m.current_price is not None}
        missing = [i for i in wanted if i not in prices]
        if missing:
            self.logger.error(f"CoinGecko returned no price for: {', '.join(missing)}")
            raise PriceFetchError()

        self.logger.debug(f"Got prices: {prices}")
        return {i: float(prices[i]) for i in wanted}
