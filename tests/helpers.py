"""
Shared test helpers: mock HTTP responses and telethon events.
"""
from unittest.mock import AsyncMock, MagicMock

WALLET = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
INVALID_ADDRESS = "not-a-solana-address"


def make_response(status_code: int = 200, payload=None):
    """Build a mock httpx.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


def rpc_response(result):
    """Wrap a result in a JSON-RPC 2.0 envelope."""
    return {
        "jsonrpc": "2.0",
        "id": 1,
        "result": result,
    }


def make_event(text: str, sender_id: int = 123456789, is_private: bool = True):
    """Mock telethon NewMessage event."""
    event = MagicMock()
    event.message.message = text
    event.sender_id = sender_id
    event.is_private = is_private
    event.reply = AsyncMock()
    return event


def replies(event) -> list:
    """Texts passed to event.reply, in order."""
    return [call.args[0] for call in event.reply.call_args_list]


# Settings read by Config.from_env
ENV_VARS = [
    "TELEGRAM_BOT_TOKEN",
    "BOT_TOKEN",
    "TELEGRAM_API_ID",
    "TELEGRAM_API_HASH",
    "SOLANA_RPC_URL",
    "SOLSCAN_API_KEY",
    "LOG_FILE",
    "LOG_LEVEL",
    "RATE_LIMIT_MIN_TIME",
    "RATE_LIMIT_MAX_CONCURRENT",
    "HTTP_TIMEOUT",
]
