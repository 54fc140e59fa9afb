"""
Demo Application

Seeds two accounts, prints their balances, transfers money from the first
to the second and prints the balances again.
"""

from typing import Callable, Optional, Tuple

from .accounts import Account
from .config import TransferMoneyConfig, get_config
from .context import TransferMoney
from .events import get_global_dispatcher


def run(config: Optional[TransferMoneyConfig] = None,
        out: Callable[[str], None] = print) -> Tuple[Account, Account]:
    """Run the demo scenario and return the two accounts"""
    config = config or get_config()

    # Realistically these would be loaded by id from a data store
    account1 = Account([config.demo_source_opening_balance], name="account1")
    account2 = Account([config.demo_destination_opening_balance], name="account2")

    out("Before: ")
    out(f"account1: {account1.current_balance()}")
    out(f"account2: {account2.current_balance()}")

    TransferMoney(
        account1,
        account2,
        config.demo_transfer_amount,
        strict=config.strict_transfers,
        dispatcher=get_global_dispatcher()
    ).execute()

    out("After: ")
    out(f"account1: {account1.current_balance()}")
    out(f"account2: {account2.current_balance()}")

    return account1, account2
