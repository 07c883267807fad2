"""
Token analysis: metadata, wallet balance, prices and network fee for one
(wallet, token) pair.
"""
import logging
from typing import Optional

from .errors import AnalysisFailed
from .metadata_client import TokenMetadataClient
from .models import AnalysisResult, DEFAULT_PRICE_IDS, lamports_to_sol
from .price_client import PriceClient
from .solana_client import SolanaClient, parse_address


class TokenAnalyzer:
    def __init__(
        self,
        solana: SolanaClient,
        metadata: TokenMetadataClient,
        prices: PriceClient,
        logger: Optional[logging.Logger] = None,
    ):
        self.solana = solana
        self.metadata = metadata
        self.prices = prices
        self.logger = logger or logging.getLogger(__name__)

    async def analyze(self, wallet_address: str, token_address: str) -> AnalysisResult:
        """
        Run the four lookups in order and combine them.

        Any failure aborts the analysis; the caller gets a single AnalysisFailed
        chained to the original error and no partial result.
        """
        try:
            # Both addresses are checked before the first request goes out
            parse_address(wallet_address)
            parse_address(token_address)

            token_info = await self.metadata.get_token_info(token_address)
            balance = await self.solana.get_token_balance(wallet_address, token_address)
            prices = await self.prices.get_prices(DEFAULT_PRICE_IDS)
            fee_lamports = await self.solana.get_recent_fee()
        except Exception as e:
            self.logger.error(f"Error during analysis: {e}")
            raise AnalysisFailed() from e

        self.logger.info(
            f"Analyzed {token_info.symbol} for {wallet_address[:8]}...: "
            f"balance={balance}, fee={fee_lamports} lamports"
        )
        return AnalysisResult(
            token_info=token_info,
            balance=balance,
            prices=prices,
            gas_fee=lamports_to_sol(fee_lamports),
        )
