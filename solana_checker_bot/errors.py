"""
Error taxonomy for the bot. Every error carries a message that is safe to show
to the Telegram user.
"""


class BotError(Exception):
    """Base class for errors surfaced to the user as a reply."""


class InvalidAddress(BotError):
    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Invalid Solana address: {address}")


class NetworkError(BotError):
    """Solana RPC unreachable, timed out, or returned an error."""


class MetadataFetchError(BotError):
    def __init__(self, message: str = "Failed to fetch token info."):
        super().__init__(message)


class PriceFetchError(BotError):
    def __init__(self, message: str = "Failed to fetch crypto prices."):
        super().__init__(message)


class AnalysisFailed(BotError):
    def __init__(self, message: str = "Failed to analyze token."):
        super().__init__(message)
