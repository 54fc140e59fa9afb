"""
Account Module

The Account data entity: an append-only ledger of signed Decimal entries.
Balances are always derived from the ledger, never stored separately.
Accounts know nothing about transfers; the roles they play are bound by
the transfer context.
"""

from decimal import Decimal
from typing import Iterable, Optional, Tuple
import threading


def to_decimal(value) -> Decimal:
    """Convert a numeric value to Decimal without going through float"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class Account:
    """
    Account that keeps a record of its own ledger entries

    Positive entries are credits, negative entries are debits. Entries are
    only ever appended; the ledger is exposed as a tuple snapshot.
    """

    def __init__(self, ledger: Optional[Iterable] = None, name: str = ""):
        self._ledger = [to_decimal(entry) for entry in (ledger or [])]
        self.name = name
        self.lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Account(ledger={list(self._ledger)!r}, name={self.name!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._ledger == other._ledger and self.name == other.name

    __hash__ = None

    @property
    def ledger(self) -> Tuple[Decimal, ...]:
        """Read-only snapshot of the ledger"""
        return tuple(self._ledger)

    def entries(self) -> Tuple[Decimal, ...]:
        """Read-only snapshot of the ledger"""
        return self.ledger

    def current_balance(self) -> Decimal:
        """Sum of all ledger entries (zero for an empty ledger)"""
        return sum(self._ledger, Decimal('0'))

    def append_entry(self, amount) -> None:
        """Append a signed entry to the ledger"""
        self._ledger.append(to_decimal(amount))

    def decrease_balance(self, amount) -> None:
        """
        Append a debit entry

        Does not check the balance; callers that need the guarantee go
        through the transfer context. A zero debit is recorded as 0, not -0.
        """
        value = to_decimal(amount)
        self.append_entry(-value if value else Decimal('0'))

    def increase_balance(self, amount) -> None:
        """Append a credit entry"""
        self.append_entry(to_decimal(amount))
