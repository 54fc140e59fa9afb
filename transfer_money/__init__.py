"""
Transfer Money

A ledger-based money transfer between two accounts. Accounts keep an
append-only ledger of signed Decimal entries; a transfer context binds a
source and a destination to their roles and moves value between them.
"""

__version__ = "1.0.0"

from .accounts import Account
from .context import TransferMoney, transfer
from .exceptions import (
    TransferError,
    InvalidAmountError,
    InsufficientFundsError,
    RoleContractError,
)
from .roles import MoneySource, MoneyDestination

__all__ = [
    "Account",
    "TransferMoney",
    "transfer",
    "TransferError",
    "InvalidAmountError",
    "InsufficientFundsError",
    "RoleContractError",
    "MoneySource",
    "MoneyDestination",
]
