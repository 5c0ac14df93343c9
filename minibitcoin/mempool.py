"""Pool of validated transactions waiting to be mined."""

from __future__ import annotations

from .transaction import Transaction


class Mempool:
    """Pending transactions keyed by id, in insertion order."""

    def __init__(self) -> None:
        self._transactions: dict[str, Transaction] = {}

    def __len__(self) -> int:
        return len(self._transactions)

    def __contains__(self, txid: object) -> bool:
        return txid in self._transactions

    def add_transaction(self, tx: Transaction) -> None:
        """Add ``tx``; a transaction with an id already present is ignored."""
        self._transactions.setdefault(tx.id, tx)

    def remove_transaction(self, txid: str) -> None:
        """Remove the transaction with ``txid``, if present."""
        self._transactions.pop(txid, None)

    def select_transactions(self, max_count: int) -> list[Transaction]:
        """Return up to ``max_count`` pending transactions.

        At least one transaction is returned whenever the pool is not empty.
        """
        result: list[Transaction] = []
        for tx in self._transactions.values():
            result.append(tx)
            if len(result) >= max_count:
                break
        return result