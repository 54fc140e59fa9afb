"""
Transfer Money Context

The use case itself: bind a source and a destination to their roles and
move a fixed amount between them. A transfer the source cannot cover is
declined without touching either ledger.
"""

from contextlib import ExitStack, contextmanager
from decimal import Decimal, InvalidOperation
from typing import Optional

from .accounts import to_decimal
from .events import EventDispatcher, EventPayload, TransferEvent
from .exceptions import InsufficientFundsError, InvalidAmountError
from .logging_config import get_logger, log_action
from .roles import as_money_destination, as_money_source, send_transfer


logger = get_logger("transfer_money.context")


def _parse_amount(amount) -> Decimal:
    try:
        value = to_decimal(amount)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidAmountError(amount) from e
    if not value.is_finite() or value < 0:
        raise InvalidAmountError(amount)
    return value


def _is_lock(candidate) -> bool:
    return all(
        callable(getattr(candidate, name, None))
        for name in ("acquire", "release", "__enter__", "__exit__")
    )


@contextmanager
def hold_locks(*participants):
    """
    Hold the locks of all distinct participants that expose one

    Only attributes that behave as locks (acquire, release and the context
    manager protocol) are taken; any other "lock" attribute is ignored.

    Locks are taken in id() order so two transfers over the same pair of
    accounts in opposite directions cannot deadlock.
    """
    locks = {}
    for participant in participants:
        lock = getattr(participant, "lock", None)
        if _is_lock(lock):
            locks[id(lock)] = lock

    with ExitStack() as stack:
        for key in sorted(locks):
            stack.enter_context(locks[key])
        yield


class TransferMoney:
    """
    Transfer Money use case

    Construct with the two participants and the amount, then call
    execute() once. Participants are bound to their roles at construction,
    so an object that cannot play its role fails immediately.
    """

    def __init__(
        self,
        source,
        destination,
        amount,
        *,
        strict: bool = False,
        dispatcher: Optional[EventDispatcher] = None
    ):
        self.source = source
        self.destination = destination
        self.amount = _parse_amount(amount)
        self.strict = strict
        self._dispatcher = dispatcher

        self._money_source = as_money_source(source)
        self._money_destination = as_money_destination(destination)

    def execute(self) -> bool:
        """
        Run the transfer

        Returns:
            True if the debit and credit were applied, False if the source
            could not cover the amount

        Raises:
            InsufficientFundsError: If declined and the context is strict
        """
        with hold_locks(self.source, self.destination):
            completed, available = send_transfer(
                self._money_source, self._money_destination, self.amount
            )

        if completed:
            log_action(
                logger, "info", f"Transfer completed: {self.amount}",
                action="transfer", resource=self._describe(),
                extra={"amount": str(self.amount)}
            )
        else:
            log_action(
                logger, "warning", "Transfer declined: insufficient funds",
                action="transfer", resource=self._describe(),
                extra={"amount": str(self.amount), "available": str(available)}
            )

        self._publish(completed, available)

        if not completed and self.strict:
            raise InsufficientFundsError(available, self.amount)
        return completed

    def _describe(self) -> str:
        source = getattr(self.source, "name", "") or type(self.source).__name__
        destination = getattr(self.destination, "name", "") or type(self.destination).__name__
        return f"{source} -> {destination}"

    def _publish(self, completed: bool, available: Decimal) -> None:
        if self._dispatcher is None:
            return
        event_type = TransferEvent.TRANSFER_COMPLETED if completed else TransferEvent.TRANSFER_DECLINED
        self._dispatcher.publish(EventPayload(
            event_type=event_type,
            data={
                "source": getattr(self.source, "name", None),
                "destination": getattr(self.destination, "name", None),
                "amount": str(self.amount),
                "available_before": str(available),
            }
        ))


def transfer(source, destination, amount, **kwargs) -> bool:
    """Shorthand for TransferMoney(source, destination, amount).execute()"""
    return TransferMoney(source, destination, amount, **kwargs).execute()
