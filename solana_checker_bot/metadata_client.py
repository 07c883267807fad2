"""
Token metadata from Solscan.
"""
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .errors import MetadataFetchError
from .models import TokenMetadata
from .rate_limiter import RateLimiter
from .solana_client import parse_address


class TokenMetadataClient:
    def __init__(
        self,
        api_url: str,
        api_key: str,
        http_client: httpx.AsyncClient,
        limiter: RateLimiter,
        logger: Optional[logging.Logger] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.http_client = http_client
        self.limiter = limiter
        self.logger = logger or logging.getLogger(__name__)

    async def get_token_info(self, token_address: str) -> TokenMetadata:
        """
        Get token name, symbol and related fields.

        Args:
            token_address: Token mint address

        Returns:
            TokenMetadata

        Raises:
            InvalidAddress: malformed mint address (no request is made)
            MetadataFetchError: non-200 status, network failure or bad payload
        """
        mint = str(parse_address(token_address))

        try:
            response = await self.limiter.schedule(
                self.http_client.get,
                f"{self.api_url}/api/v1/tokenInfo/{mint}",
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except httpx.HTTPError as e:
            self.logger.error(f"Error fetching token info from Solscan: {e}")
            raise MetadataFetchError() from e

        if response.status_code != 200:
            self.logger.error(f"Solscan tokenInfo API error: {response.status_code} for {mint}")
            raise MetadataFetchError()

        try:
            data = response.json().get("data")
        except (ValueError, AttributeError) as e:
            self.logger.error(f"Invalid token info payload from Solscan for {mint}: {e}")
            raise MetadataFetchError() from e

        if not isinstance(data, dict) or not data:
            self.logger.error(f"Solscan returned no token info for {mint}")
            raise MetadataFetchError()

        try:
            return TokenMetadata.model_validate({"address": mint, **data})
        except ValidationError as e:
            self.logger.error(f"Invalid token info payload from Solscan for {mint}: {e}")
            raise MetadataFetchError() from e
