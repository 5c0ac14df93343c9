"""A chain of blocks with hash-link, difficulty and transaction checks."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from typing import TextIO

from .block import Block
from .utxo import UTXOManager

logger = logging.getLogger(__name__)

DIFFICULTY = 3
_TARGET = "0" * DIFFICULTY


class Blockchain:
    """An append-only list of validated blocks."""

    def __init__(self) -> None:
        self._chain: list[Block] = []

    def __len__(self) -> int:
        return len(self._chain)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._chain)

    def add_block(self, block: Block, utxos: UTXOManager) -> bool:
        """Append ``block`` if it links to the tip, meets difficulty and spends validly.

        The first block is only checked for valid transactions.
        """
        if self._chain:
            prev = self._chain[-1]
            if block.prev_hash != prev.calculate_hash():
                logger.warning("Invalid previous hash.")
                return False
            if not block.calculate_hash().startswith(_TARGET):
                logger.warning("Block does not meet difficulty requirements.")
                return False

        if not block.validate_transactions(utxos):
            logger.warning("Block contains invalid transactions.")
            return False

        self._chain.append(block)
        return True

    def latest_block(self) -> Block:
        """Return the last block; raise IndexError if the chain is empty."""
        if not self._chain:
            raise IndexError("blockchain is empty")
        return self._chain[-1]

    def is_valid_chain(self) -> bool:
        """Check the hash links and difficulty of every block after the first."""
        return all(
            cur.prev_hash == prev.calculate_hash()
            and cur.calculate_hash().startswith(_TARGET)
            for prev, cur in zip(self._chain, self._chain[1:])
        )

    def print(self, file: TextIO | None = None) -> None:
        """Write every block, each followed by a blank line."""
        out = sys.stdout if file is None else file
        for block in self._chain:
            print(block, file=out)