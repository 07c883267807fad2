"""
Reply texts (Telegram HTML parse mode).
"""
from html import escape
from typing import List, Tuple

from .models import AnalysisResult, BITCOIN_ID, ETHEREUM_ID, PriceQuote, SOLANA_ID

# (command, arguments, description)
COMMANDS: List[Tuple[str, str, str]] = [
    ("check", "<TOKEN_ADDRESS> <SOLANA_ADDRESS>", "Analyze token info"),
    ("balance", "<SOLANA_ADDRESS>", "Get Solana balance"),
    ("prices", "", "Get current prices of Solana, Bitcoin, and Ethereum"),
    ("gas", "", "Get Solana gas fees"),
    ("help", "", "Display this help message"),
]

CHECK_USAGE = "❌ Usage: /check &lt;TOKEN_ADDRESS&gt; &lt;SOLANA_ADDRESS&gt;"
BALANCE_USAGE = "❌ Usage: /balance &lt;SOLANA_ADDRESS&gt;"
ANALYZING = "🔍 Analyzing the token. Please wait..."
UNKNOWN_COMMAND = "🤔 Unknown command. Use /help to see what I can do."
GENERIC_ERROR = "❌ Error: Something went wrong. Please try again later."


def format_amount(value: float, decimals: int = 9) -> str:
    """Fixed-point without trailing zeros: 2.500000000 -> '2.5'."""
    formatted = f"{value:.{decimals}f}"
    return formatted.rstrip('0').rstrip('.') if '.' in formatted else formatted


def format_usd(value: float) -> str:
    if value >= 1:
        return f"${value:,.2f}"
    return f"${format_amount(value, 8)}"


def error_message(error: Exception) -> str:
    return f"❌ Error: {escape(str(error))}"


def help_message() -> str:
    lines = ["🚀 <b>Solana Honeypot Checker Bot - Commands</b>", ""]
    for command, args, description in COMMANDS:
        usage = f"/{command} {escape(args)}".rstrip()
        lines.append(f"{usage} - {description}")
    return "\n".join(lines)


def analysis_message(analysis: AnalysisResult) -> str:
    token = analysis.token_info
    symbol = escape(token.symbol)
    sol_price = analysis.sol_price

    gas_line = f"<b>Gas Fee:</b> {format_amount(analysis.gas_fee)} SOL"
    if sol_price is not None:
        gas_line += f" (~{format_usd(analysis.gas_fee * sol_price)})"

    lines = [
        "🧾 <b>Token Analysis</b>",
        "",
        f"<b>Token Name:</b> {escape(token.name)}",
        f"<b>Token Symbol:</b> {symbol}",
        f"<b>SOL Price:</b> {format_usd(sol_price) if sol_price is not None else 'n/a'}",
        f"<b>Your Balance:</b> {format_amount(analysis.balance)} {symbol}",
        gas_line,
    ]
    return "\n".join(lines)


def balance_message(sol: float) -> str:
    return f"📊 <b>Solana Balance:</b> {format_amount(sol)} SOL"


def prices_message(prices: PriceQuote) -> str:
    return "\n".join([
        "💰 <b>Current Crypto Prices</b>",
        "",
        f"Solana: {format_usd(prices[SOLANA_ID])}",
        f"Bitcoin: {format_usd(prices[BITCOIN_ID])}",
        f"Ethereum: {format_usd(prices[ETHEREUM_ID])}",
    ])


def gas_message(fee_sol: float) -> str:
    return f"⛽ <b>Solana Gas Fee:</b> {format_amount(fee_sol)} SOL per transaction"
