"""Paystack REST resource modules."""

from .miscellaneous import Miscellaneous
from .recipient import Recipient
from .split import Split
from .transaction import Transaction
from .transfer import Transfer
from .verification import Verification
from .virtual import VirtualAccount

__all__ = [
    "Miscellaneous",
    "Recipient",
    "Split",
    "Transaction",
    "Transfer",
    "Verification",
    "VirtualAccount",
]
