"""Wallet domain exports"""

from .exceptions import TransactionNotFoundError, TransactionNotPendingError, WalletNotFoundError
from .models import FundingMethod, TransactionDirection, TransactionStatus, WalletTransactionRecord, WalletView
from .service import WalletService

__all__ = [
    "FundingMethod",
    "TransactionDirection",
    "TransactionNotFoundError",
    "TransactionNotPendingError",
    "TransactionStatus",
    "WalletNotFoundError",
    "WalletService",
    "WalletTransactionRecord",
    "WalletView",
]
