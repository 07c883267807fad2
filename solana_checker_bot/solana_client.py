"""
Read-only Solana JSON-RPC client: SOL balances, SPL token balances and the
current fee per signature.
"""
import base64
import logging
from typing import Any, List, Optional

import httpx
from solders.hash import Hash
from solders.message import Message
from solders.pubkey import Pubkey

from .errors import InvalidAddress, NetworkError
from .rate_limiter import RateLimiter

COMMITMENT = "confirmed"


def parse_address(address: str) -> Pubkey:
    """
    Parse a base58 Solana address.

    Raises:
        InvalidAddress: if the string is not a valid 32-byte public key
    """
    if not address or not isinstance(address, str):
        raise InvalidAddress(str(address))
    try:
        return Pubkey.from_string(address)
    except ValueError as e:
        raise InvalidAddress(address) from e


class SolanaClient:
    def __init__(
        self,
        rpc_url: str,
        http_client: httpx.AsyncClient,
        limiter: RateLimiter,
        logger: Optional[logging.Logger] = None,
    ):
        self.rpc_url = rpc_url
        self.http_client = http_client
        self.limiter = limiter
        self.logger = logger or logging.getLogger(__name__)

    async def _rpc(self, method: str, params: List[Any]) -> Any:
        """Send a JSON-RPC request through the rate limiter and return `result`."""
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        try:
            response = await self.limiter.schedule(self.http_client.post, self.rpc_url, json=payload)
        except httpx.TimeoutException as e:
            self.logger.error(f"Solana RPC timeout on {method}")
            raise NetworkError(f"Solana RPC timed out ({method}).") from e
        except httpx.HTTPError as e:
            self.logger.error(f"Solana RPC request failed on {method}: {e}")
            raise NetworkError(f"Solana RPC request failed ({method}).") from e

        if response.status_code != 200:
            self.logger.error(f"Solana RPC HTTP {response.status_code} on {method}")
            raise NetworkError(f"Solana RPC returned HTTP {response.status_code} ({method}).")

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Solana RPC returned invalid JSON on {method}")
            raise NetworkError(f"Solana RPC returned an invalid response ({method}).") from e

        error = data.get("error")
        if error:
            message = error.get("message", error) if isinstance(error, dict) else error
            self.logger.error(f"Solana RPC error on {method}: {message}")
            raise NetworkError(f"Solana RPC error: {message}")

        if "result" not in data:
            raise NetworkError(f"Solana RPC returned no result ({method}).")
        return data["result"]

    async def get_balance(self, address: str) -> int:
        """
        Get the SOL balance of an account.

        Args:
            address: Wallet address (base58)

        Returns:
            Balance in lamports
        """
        pubkey = parse_address(address)
        result = await self._rpc("getBalance", [str(pubkey), {"commitment": COMMITMENT}])
        try:
            return int(result["value"])
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkError("Solana RPC returned a malformed balance.") from e

    async def get_token_balance(self, address: str, token_mint: str) -> float:
        """
        Get the ui-scaled balance the owner holds of a given mint.

        A wallet with no token account for the mint has a balance of 0.

        Args:
            address: Owner wallet address
            token_mint: Token mint address

        Returns:
            Token amount scaled by the mint's decimals
        """
        owner = parse_address(address)
        mint = parse_address(token_mint)
        result = await self._rpc(
            "getTokenAccountsByOwner",
            [
                str(owner),
                {"mint": str(mint)},
                {"encoding": "jsonParsed", "commitment": COMMITMENT},
            ],
        )

        accounts = (result or {}).get("value") or []
        if not accounts:
            self.logger.info(f"No token account for mint {token_mint[:8]}... owned by {address[:8]}...")
            return 0.0

        try:
            token_amount = accounts[0]["account"]["data"]["parsed"]["info"]["tokenAmount"]
        except (KeyError, TypeError) as e:
            raise NetworkError("Solana RPC returned a malformed token account.") from e

        ui_amount = token_amount.get("uiAmount")
        if ui_amount is None:
            ui_amount = token_amount.get("uiAmountString") or 0
        return float(ui_amount)

    async def get_recent_fee(self) -> int:
        """
        Get the current fee for a single-signature transaction.

        Returns:
            Fee in lamports
        """
        result = await self._rpc("getLatestBlockhash", [{"commitment": COMMITMENT}])
        try:
            blockhash = Hash.from_string(result["value"]["blockhash"])
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkError("Solana RPC returned a malformed blockhash.") from e

        # One signer, no instructions: the fee is exactly one signature's worth
        message = Message.new_with_blockhash([], Pubkey.default(), blockhash)
        encoded = base64.b64encode(bytes(message)).decode("ascii")

        result = await self._rpc("getFeeForMessage", [encoded, {"commitment": COMMITMENT}])
        fee = (result or {}).get("value")
        if fee is None:
            raise NetworkError("Failed to get Solana gas fee.")
        return int(fee)
