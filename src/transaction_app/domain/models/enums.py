"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a transaction."""

    CREDIT = "CREDIT"  # money in
    DEBIT = "DEBIT"  # money out
