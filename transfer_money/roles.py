"""
Transfer Roles

Two roles take part in a transfer: the money source and the money
destination. Each role is a capability contract expressed as a Protocol,
so any object providing the methods can play it. Role methods hold the
transfer algorithm; role players adapt the Account data entity to the
contracts.
"""

from decimal import Decimal
from typing import List, NamedTuple, Protocol, runtime_checkable

from .accounts import Account
from .exceptions import RoleContractError


@runtime_checkable
class MoneySource(Protocol):
    """Contract for objects that can be debited"""

    def available_balance(self) -> Decimal:
        ...

    def decrease_balance(self, amount: Decimal) -> None:
        ...


@runtime_checkable
class MoneyDestination(Protocol):
    """Contract for objects that can be credited"""

    def increase_balance(self, amount: Decimal) -> None:
        ...


class TransferOutcome(NamedTuple):
    """Result of send_transfer: whether it applied, and the balance it checked"""
    completed: bool
    available: Decimal


# Role methods

def send_transfer(source: MoneySource, destination: MoneyDestination, amount: Decimal) -> TransferOutcome:
    """
    Move amount from source to destination if the source can cover it

    The available balance is queried exactly once. The debit is applied
    before the credit and there is no rollback, so the destination's
    increase_balance must not fail.

    Returns:
        TransferOutcome with completed False if the balance check failed
    """
    available = source.available_balance()
    if available >= amount:
        source.decrease_balance(amount)
        receive_transfer(destination, amount)
        return TransferOutcome(True, available)
    return TransferOutcome(False, available)


def receive_transfer(destination: MoneyDestination, amount: Decimal) -> None:
    destination.increase_balance(amount)


# Role players for Account

class MoneySourceAccount:
    """Lets an Account play the MoneySource role"""

    def __init__(self, account: Account):
        self.account = account

    def available_balance(self) -> Decimal:
        return self.account.current_balance()

    def decrease_balance(self, amount: Decimal) -> None:
        self.account.decrease_balance(amount)


class MoneyDestinationAccount:
    """Lets an Account play the MoneyDestination role"""

    def __init__(self, account: Account):
        self.account = account

    def increase_balance(self, amount: Decimal) -> None:
        self.account.increase_balance(amount)


def _missing_methods(participant, names: List[str]) -> List[str]:
    return [name for name in names if not callable(getattr(participant, name, None))]


def as_money_source(participant) -> MoneySource:
    """
    Bind a participant to the MoneySource role

    Accounts are wrapped in their role player; objects already fulfilling
    the contract are used as they are.

    Raises:
        RoleContractError: If the participant lacks a required method
    """
    if isinstance(participant, Account):
        return MoneySourceAccount(participant)
    missing = _missing_methods(participant, ["available_balance", "decrease_balance"])
    if missing:
        raise RoleContractError("MoneySource", participant, missing)
    return participant


def as_money_destination(participant) -> MoneyDestination:
    """
    Bind a participant to the MoneyDestination role

    Raises:
        RoleContractError: If the participant lacks increase_balance
    """
    if isinstance(participant, Account):
        return MoneyDestinationAccount(participant)
    missing = _missing_methods(participant, ["increase_balance"])
    if missing:
        raise RoleContractError("MoneyDestination", participant, missing)
    return participant
