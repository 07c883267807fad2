"""
Pytest fixtures and configuration for tests.
"""
import pytest
from unittest.mock import AsyncMock

import httpx

from solana_checker_bot.config import Config
from solana_checker_bot.rate_limiter import RateLimiter

from helpers import USDC_MINT, WALLET


# =============================================================================
# ADDRESSES
# =============================================================================

@pytest.fixture
def wallet_address():
    return WALLET


@pytest.fixture
def token_mint():
    return USDC_MINT


# =============================================================================
# CONFIG
# =============================================================================

@pytest.fixture
def test_config(tmp_path):
    """Configuration for tests; nothing here points at a real service."""
    return Config(
        TELEGRAM_BOT_TOKEN="123456:test-token",
        TELEGRAM_API_ID=12345,
        TELEGRAM_API_HASH="test-api-hash",
        SOLANA_RPC_URL="https://rpc.test",
        SOLSCAN_API_KEY="test-solscan-key",
        SOLSCAN_API_URL="https://solscan.test",
        COINGECKO_API_URL="https://coingecko.test/api/v3",
        LOG_FILE=str(tmp_path / "bot.log"),
        RATE_LIMIT_MIN_TIME=0.0,
    )


# =============================================================================
# HTTP MOCKS
# =============================================================================

@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.get = AsyncMock()
    client.post = AsyncMock()
    return client


@pytest.fixture
def limiter():
    """Rate limiter with no spacing so tests run fast."""
    return RateLimiter(min_time=0.0, max_concurrent=5)


# =============================================================================
# SAMPLE PAYLOADS
# =============================================================================

@pytest.fixture
def solscan_token_info():
    """Sample Solscan tokenInfo response."""
    return {
        "success": True,
        "data": {
            "name": "Test Token",
            "symbol": "TT",
            "decimals": 6,
            "icon": "https://example.com/tt.png",
            "holder": 4200,
        },
    }


@pytest.fixture
def coingecko_markets():
    """Sample CoinGecko /coins/markets response."""
    return [
        {"id": "bitcoin", "symbol": "btc", "name": "Bitcoin", "current_price": 65000.0},
        {"id": "ethereum", "symbol": "eth", "name": "Ethereum", "current_price": 3200.5},
        {"id": "solana", "symbol": "sol", "name": "Solana", "current_price": 150.25},
    ]


@pytest.fixture
def token_accounts_result():
    """getTokenAccountsByOwner result with one parsed account."""
    def make_result(ui_amount=1234.5, amount="1234500000", decimals=6):
        return {
            "context": {"slot": 250000000},
            "value": [
                {
                    "pubkey": "11111111111111111111111111111111",
                    "account": {
                        "data": {
                            "parsed": {
                                "info": {
                                    "mint": USDC_MINT,
                                    "owner": WALLET,
                                    "tokenAmount": {
                                        "amount": amount,
                                        "decimals": decimals,
                                        "uiAmount": ui_amount,
                                        "uiAmountString": str(ui_amount) if ui_amount is not None else "0",
                                    },
                                },
                                "type": "account",
                            },
                            "program": "spl-token",
                        },
                    },
                }
            ],
        }
    return make_result
