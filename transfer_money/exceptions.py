"""
Transfer Errors

Errors raised by the transfer context. They derive from the builtin
ValueError/TypeError so existing handlers keep working.
"""

from decimal import Decimal
from typing import Iterable


class TransferError(ValueError):
    """Base class for transfer failures"""


class InvalidAmountError(TransferError):
    """Amount is negative, non-finite or not a number"""

    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Invalid transfer amount: {amount!r}")


class InsufficientFundsError(TransferError):
    """Source cannot cover the requested amount (strict mode only)"""

    def __init__(self, available: Decimal, requested: Decimal):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient funds: available {available}, requested {requested}"
        )


class RoleContractError(TypeError):
    """Participant does not provide the methods its role requires"""

    def __init__(self, role: str, participant, missing: Iterable[str]):
        self.role = role
        self.participant = participant
        self.missing = tuple(missing)
        super().__init__(
            f"{type(participant).__name__} cannot play {role}: "
            f"missing {', '.join(self.missing)}"
        )
