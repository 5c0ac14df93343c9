"""Blocks: an ordered batch of transactions sealed by a proof-of-work hash."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from .hashing import sha256
from .transaction import Transaction
from .utxo import UTXOManager

logger = logging.getLogger(__name__)


class Block:
    """A block of transactions linked to its predecessor by ``prev_hash``."""

    def __init__(
        self,
        index: int,
        transactions: Iterable[Transaction],
        prev_hash: str,
        timestamp: int | None = None,
    ) -> None:
        self.index = index
        self.transactions: list[Transaction] = list(transactions)
        self.prev_hash = prev_hash
        self.timestamp = int(time.time()) if timestamp is None else timestamp
        self.nonce = 0
        self.hash = self.calculate_hash()

    def calculate_hash(self) -> str:
        """Hash the index, timestamp, transaction ids, previous hash and nonce."""
        tx_ids = "".join(tx.id for tx in self.transactions)
        return sha256(f"{self.index}{self.timestamp}{tx_ids}{self.prev_hash}{self.nonce}")

    def mine_block(self, difficulty: int) -> None:
        """Increase the nonce until the hash starts with ``difficulty`` zeros."""
        target = "0" * difficulty
        while not self.hash.startswith(target):
            self.nonce += 1
            self.hash = self.calculate_hash()

    def validate_transactions(self, utxos: UTXOManager) -> bool:
        """Check every transaction in order against a copy of ``utxos``.

        Outputs of earlier transactions in the block become spendable by later
        ones, and an output spent twice within the block is rejected.
        """
        working = utxos.copy()
        for tx in self.transactions:
            if not working.validate_transaction(tx):
                logger.warning("Invalid transaction in block: %s", tx.id)
                return False
            working.add_transaction(tx)
        return True

    def __str__(self) -> str:
        lines = [
            f"Index: {self.index}",
            f"Timestamp: {self.timestamp}",
            f"Previous Hash: {self.prev_hash}",
            f"Hash: {self.hash}",
            f"Nonce: {self.nonce}",
            "Transactions:",
        ]
        lines.extend(f" - TxID: {tx.id}" for tx in self.transactions)
        return "\n".join(lines) + "\n"