"""
Telegram bot for the Solana checker.
Slash commands only; every command is handled independently with no per-user state.
"""
import logging
from typing import Awaitable, Callable, Dict, List, Optional

from telethon import TelegramClient, events
from telethon.sessions import StringSession
from telethon.tl.functions.bots import SetBotCommandsRequest
from telethon.tl.types import BotCommand, BotCommandScopeDefault

from . import messages
from .analysis import TokenAnalyzer
from .config import Config
from .errors import BotError
from .models import DEFAULT_PRICE_IDS, lamports_to_sol
from .price_client import PriceClient
from .solana_client import SolanaClient

CommandHandler = Callable[[object, List[str]], Awaitable[None]]


class TelegramBot:
    def __init__(
        self,
        config: Config,
        solana: SolanaClient,
        prices: PriceClient,
        analyzer: TokenAnalyzer,
        client: Optional[TelegramClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.solana = solana
        self.prices = prices
        self.analyzer = analyzer
        self.logger = logger or logging.getLogger(__name__)
        # StringSession (in-memory): nothing written to disk between restarts
        self.client = client or TelegramClient(
            StringSession(),
            config.TELEGRAM_API_ID,
            config.TELEGRAM_API_HASH,
        )
        self.bot_username: Optional[str] = None

        self._commands: Dict[str, CommandHandler] = {
            '/check': self._handle_check,
            '/balance': self._handle_balance,
            '/prices': self._handle_prices,
            '/gas': self._handle_gas,
            '/help': self._handle_help,
            '/start': self._handle_help,
        }

        self._register_handlers()

    def _register_handlers(self):
        """Register message handlers."""

        @self.client.on(events.NewMessage(incoming=True, pattern=r'^/'))
        async def handle_command_message(event):
            await self.handle_message(event)

    async def handle_message(self, event):
        """Entry point for every incoming slash-command message."""
        message_text = (event.message.message or "").strip()
        if not message_text.startswith('/'):
            return

        self.logger.info(f"Received command from {event.sender_id}: {message_text[:80]}")
        try:
            await self._handle_command(event, message_text)
        except Exception as e:
            # Errors never escape into telethon; later messages are still handled
            self.logger.error(f"Unhandled error while processing '{message_text[:50]}': {e}", exc_info=True)

    async def _handle_command(self, event, message_text: str):
        parts = message_text.split()
        command, _, target = parts[0].lower().partition('@')  # Handle /cmd@botname
        args = parts[1:]

        if target and self.bot_username and target != self.bot_username.lower():
            # Addressed to another bot in the same chat
            return

        handler = self._commands.get(command)
        if handler is None:
            # Hint only in private chats
            if event.is_private:
                await self._reply(event, messages.UNKNOWN_COMMAND)
            return
        await handler(event, args)

    async def _reply(self, event, text: str):
        await event.reply(text, parse_mode='html')

    async def _reply_error(self, event, command: str, error: Exception):
        if isinstance(error, BotError):
            self.logger.warning(f"{command} failed: {error}")
            await self._reply(event, messages.error_message(error))
        else:
            self.logger.error(f"{command} failed unexpectedly: {error}", exc_info=True)
            await self._reply(event, messages.GENERIC_ERROR)

    # =========================================================================
    # COMMANDS
    # =========================================================================

    async def _handle_check(self, event, args: List[str]):
        """Handle /check <TOKEN_ADDRESS> <SOLANA_ADDRESS>."""
        if len(args) < 2:
            await self._reply(event, messages.CHECK_USAGE)
            return

        token_address, address = args[0], args[1]
        try:
            await self._reply(event, messages.ANALYZING)
            analysis = await self.analyzer.analyze(address, token_address)
            await self._reply(event, messages.analysis_message(analysis))
        except Exception as e:
            await self._reply_error(event, "/check", e)

    async def _handle_balance(self, event, args: List[str]):
        """Handle /balance <SOLANA_ADDRESS>."""
        if len(args) < 1:
            await self._reply(event, messages.BALANCE_USAGE)
            return

        try:
            lamports = await self.solana.get_balance(args[0])
            await self._reply(event, messages.balance_message(lamports_to_sol(lamports)))
        except Exception as e:
            await self._reply_error(event, "/balance", e)

    async def _handle_prices(self, event, args: List[str]):
        """Handle /prices."""
        try:
            prices = await self.prices.get_prices(DEFAULT_PRICE_IDS)
            await self._reply(event, messages.prices_message(prices))
        except Exception as e:
            await self._reply_error(event, "/prices", e)

    async def _handle_gas(self, event, args: List[str]):
        """Handle /gas."""
        try:
            fee = await self.solana.get_recent_fee()
            await self._reply(event, messages.gas_message(lamports_to_sol(fee)))
        except Exception as e:
            await self._reply_error(event, "/gas", e)

    async def _handle_help(self, event, args: List[str]):
        """Handle /help (and /start). No network calls."""
        await self._reply(event, messages.help_message())

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def _set_bot_commands(self):
        """Publish the command list shown in Telegram's menu."""
        commands = [
            BotCommand(command=command, description=description)
            for command, _, description in messages.COMMANDS
        ]
        try:
            await self.client(SetBotCommandsRequest(
                scope=BotCommandScopeDefault(),
                lang_code='',
                commands=commands,
            ))
            self.logger.info("Bot commands registered")
        except Exception as e:
            self.logger.warning(f"Could not set bot commands: {e}")

    async def start(self):
        """Log in and serve until disconnected."""
        await self.client.start(bot_token=self.config.TELEGRAM_BOT_TOKEN)

        me = await self.client.get_me()
        self.bot_username = me.username
        self.logger.info(f"Bot is running as @{self.bot_username}")

        await self._set_bot_commands()

        await self.client.run_until_disconnected()

    async def stop(self):
        """Stop the Telegram bot."""
        await self.client.disconnect()
        self.logger.info("Telegram bot stopped")
