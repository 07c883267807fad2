import asyncio
import logging
import signal
import sys

import httpx

from .analysis import TokenAnalyzer
from .config import Config, ConfigError
from .logging_setup import LOG_FORMAT, setup_logging
from .metadata_client import TokenMetadataClient
from .price_client import PriceClient
from .rate_limiter import RateLimiter
from .solana_client import SolanaClient
from .telegram_bot import TelegramBot


def build_bot(config: Config, http_client: httpx.AsyncClient, logger: logging.Logger) -> TelegramBot:
    """Wire the clients, analyzer and bot around one shared HTTP client and rate limiter."""
    limiter = RateLimiter(
        min_time=config.RATE_LIMIT_MIN_TIME,
        max_concurrent=config.RATE_LIMIT_MAX_CONCURRENT,
    )
    solana = SolanaClient(config.SOLANA_RPC_URL, http_client, limiter)
    metadata = TokenMetadataClient(config.SOLSCAN_API_URL, config.SOLSCAN_API_KEY, http_client, limiter)
    prices = PriceClient(config.COINGECKO_API_URL, http_client, limiter)
    analyzer = TokenAnalyzer(solana, metadata, prices)
    return TelegramBot(config, solana, prices, analyzer, logger=logger)


async def run(config: Config, logger: logging.Logger):
    """Run the bot until SIGINT/SIGTERM or disconnect."""
    async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT) as http_client:
        bot = build_bot(config, http_client, logger)

        loop = asyncio.get_running_loop()
        shutdown_tasks = set()

        def request_stop(sig: signal.Signals):
            logger.info(f"Received {sig.name}, stopping bot")
            task = loop.create_task(bot.stop())
            shutdown_tasks.add(task)
            task.add_done_callback(shutdown_tasks.discard)

        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, request_stop, sig)
            except NotImplementedError:
                # Windows event loops have no signal handlers; Ctrl+C still raises KeyboardInterrupt
                pass

        await bot.start()


def main():
    try:
        config = Config.from_env()
        logger = setup_logging(config)
    except (ConfigError, OSError) as e:
        # File logging is not available yet; report on the console
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logging.getLogger("solana_checker_bot").error(f"Bot launch failed: {e}")
        sys.exit(1)

    missing = config.validate()
    if missing:
        logger.error(f"Bot launch failed: missing configuration {', '.join(missing)}")
        sys.exit(1)

    try:
        asyncio.run(run(config, logger))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"Bot launch failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
