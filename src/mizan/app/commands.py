"""Menu commands.

Each command is a ``Command`` value: its menu key, title, whether it needs
a logged-in session, and a handler taking the ``AppContext``. Handlers own
all prompting and re-prompt on invalid input; the portfolio core never
sees unvalidated data.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from mizan.accounts.connections import connect_bank, connect_brokerage
from mizan.accounts.users import is_valid_password
from mizan.core.exceptions import ValidationError
from mizan.portfolio.models import Asset
from mizan.portfolio.report import export_report, format_money
from mizan.portfolio.validation import (
    CATEGORY_CHOICES,
    parse_category,
    parse_name,
    parse_price,
    parse_purchase_date,
    parse_quantity,
)

from .context import AppContext

Handler = Callable[[AppContext], None]


@dataclass(frozen=True)
class Command:
    """A menu entry."""

    key: int
    title: str
    requires_auth: bool
    handler: Handler

    def run(self, ctx: AppContext) -> None:
        self.handler(ctx)


def _ask_until_valid(ctx: AppContext, label: str, parse: Callable[[str], object]):
    """Prompt repeatedly until ``parse`` accepts the input."""
    while True:
        try:
            return parse(ctx.prompt(label))
        except ValidationError as e:
            ctx.say(str(e))


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


def sign_up(ctx: AppContext) -> None:
    ctx.say("\n=== Sign Up ===")

    while True:
        username = ctx.prompt("Username: ").strip()
        if not username:
            ctx.say("Username cannot be empty!")
        elif ctx.users.user_exists(username):
            ctx.say("Username already exists!")
        else:
            break

    while True:
        password = ctx.prompt("Password (min 8 chars, 1 uppercase, 1 number): ", password=True).strip()
        if is_valid_password(password):
            break
        ctx.say("Invalid password format!")

    ctx.users.add_user(username, password)
    ctx.say("Account created!")


def login(ctx: AppContext) -> None:
    ctx.say("\n=== Login ===")
    username = ctx.prompt("Username: ")
    password = ctx.prompt("Password: ", password=True)

    if ctx.session.login(ctx.users, username, password):
        ctx.say("Login successful!")
    else:
        ctx.say("Invalid credentials!")


# ---------------------------------------------------------------------------
# Portfolio
# ---------------------------------------------------------------------------


def add_asset(ctx: AppContext) -> None:
    ctx.say("\n=== Add Asset ===")

    name = _ask_until_valid(ctx, "Asset Name: ", parse_name)
    quantity = _ask_until_valid(ctx, "Quantity: ", parse_quantity)
    category = _ask_until_valid(ctx, f"Type ({CATEGORY_CHOICES}): ", parse_category)
    purchase_date = _ask_until_valid(ctx, "Purchase Date (YYYY-MM-DD): ", parse_purchase_date)
    price = _ask_until_valid(ctx, "Purchase Price: ", parse_price)

    ctx.portfolio.add_asset(Asset(name, quantity, category, purchase_date, price))
    ctx.say("Asset added!")


def remove_asset(ctx: AppContext) -> None:
    ctx.say("\n=== Remove Asset ===")
    name = ctx.prompt("Enter asset name to remove: ").strip()

    removed = ctx.portfolio.remove_asset(name)
    ctx.say("Asset removed successfully!" if removed else "Asset not found!")


def calculate_zakat(ctx: AppContext) -> None:
    ctx.say("\n=== Zakat Calculation ===")
    amount = ctx.zakat_calculator.calculate_zakat(ctx.portfolio.list_assets())
    ctx.say(f"Total Zakat Due: {format_money(amount, ctx.currency)}")


def export_portfolio_report(ctx: AppContext) -> None:
    ctx.say("\n=== Export Portfolio Report ===")
    fmt = ctx.prompt("Enter format (PDF/EXCEL): ")

    try:
        report = export_report(ctx.portfolio.list_assets(), fmt, ctx.currency)
    except ValidationError as e:
        ctx.say(str(e))
        return

    ctx.say("\nReport generated successfully!")
    ctx.say(f"File: {report.filename}")
    ctx.say(report.content)


# ---------------------------------------------------------------------------
# Connections
# ---------------------------------------------------------------------------


def connect_bank_account(ctx: AppContext) -> None:
    ctx.say("\n=== Connect Bank Account ===")
    bank_name = ctx.prompt("Enter bank name: ")
    card_number = ctx.prompt("Enter card number (16 digits): ", password=True)
    otp = ctx.prompt("Enter OTP (6 digits): ", password=True)

    ctx.say(connect_bank(bank_name, card_number, otp).message)


def connect_stock_account(ctx: AppContext) -> None:
    ctx.say("\n=== Connect Stock Brokerage ===")
    platform = ctx.prompt("Enter platform name (BINANCE/THNDR): ")
    api_key = ctx.prompt("Enter API key: ", password=True)

    result = connect_brokerage(platform, api_key, min_api_key_length=ctx.min_api_key_length)
    ctx.say(result.message)


def build_commands() -> dict[int, Command]:
    """Menu key -> command, in display order."""
    commands = [
        Command(1, "Sign Up", False, sign_up),
        Command(2, "Login", False, login),
        Command(3, "Add Asset", True, add_asset),
        Command(4, "Remove Asset", True, remove_asset),
        Command(5, "Calculate Zakat", True, calculate_zakat),
        Command(6, "Connect Bank", True, connect_bank_account),
        Command(7, "Connect Stock", True, connect_stock_account),
        Command(8, "Export Report", True, export_portfolio_report),
    ]
    return {command.key: command for command in commands}
