"""
Request-scoped data models and unit helpers.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


# =============================================================================
# UNITS
# =============================================================================

LAMPORTS_PER_SOL = 1_000_000_000

# CoinGecko asset ids shown by /prices
SOLANA_ID = "solana"
BITCOIN_ID = "bitcoin"
ETHEREUM_ID = "ethereum"
DEFAULT_PRICE_IDS = (SOLANA_ID, BITCOIN_ID, ETHEREUM_ID)


def lamports_to_sol(lamports: int) -> float:
    """Convert lamports to SOL."""
    return lamports / LAMPORTS_PER_SOL


# =============================================================================
# PYDANTIC MODELS (for upstream API validation)
# =============================================================================

class TokenMetadata(BaseModel):
    """Token info as returned by the Solscan tokenInfo endpoint."""
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    symbol: str
    address: Optional[str] = None
    decimals: Optional[int] = None
    icon: Optional[str] = None


class CoinMarket(BaseModel):
    """One row of the CoinGecko /coins/markets response."""
    model_config = ConfigDict(extra="ignore")

    id: str
    symbol: Optional[str] = None
    name: Optional[str] = None
    current_price: Optional[float] = None


# =============================================================================
# ANALYSIS
# =============================================================================

PriceQuote = Dict[str, float]


@dataclass(frozen=True)
class AnalysisResult:
    token_info: TokenMetadata
    balance: float      # ui-scaled token amount held by the wallet
    prices: PriceQuote  # CoinGecko id -> USD
    gas_fee: float      # fee per signature, in SOL

    @property
    def sol_price(self) -> Optional[float]:
        return self.prices.get(SOLANA_ID)
