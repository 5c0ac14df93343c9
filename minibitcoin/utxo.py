"""Tracking of unspent transaction outputs and validation of spends."""

from __future__ import annotations

import logging

from .crypto import verify_signature
from .transaction import Transaction, TxIn, TxOut

logger = logging.getLogger(__name__)


def _key(txid: str, index: int) -> str:
    return f"{txid}:{index}"


class UTXOManager:
    """The set of unspent outputs, keyed by ``"txid:index"``."""

    def __init__(self) -> None:
        self._utxos: dict[str, TxOut] = {}

    def __len__(self) -> int:
        return len(self._utxos)

    def copy(self) -> UTXOManager:
        """Return an independent copy of this set."""
        clone = UTXOManager()
        clone._utxos = dict(self._utxos)
        return clone

    def add_transaction(self, tx: Transaction) -> None:
        """Record the outputs of ``tx`` and mark its inputs spent."""
        for index, out in enumerate(tx.outputs):
            self._utxos[_key(tx.id, index)] = out
        for tx_in in tx.inputs:
            self.consume_input(tx_in)

    def is_unspent(self, tx_in: TxIn) -> bool:
        """True if the output referenced by ``tx_in`` is still unspent."""
        return _key(tx_in.prev_tx_id, tx_in.output_index) in self._utxos

    def consume_input(self, tx_in: TxIn) -> None:
        """Remove the output referenced by ``tx_in``, if present."""
        self._utxos.pop(_key(tx_in.prev_tx_id, tx_in.output_index), None)

    def get_balance(self, address: str) -> float:
        """Sum of unspent amounts paid to ``address``."""
        return sum(
            (self._utxos[key].amount for key in sorted(self._utxos)
             if self._utxos[key].recipient == address),
            0.0,
        )

    def validate_transaction(self, tx: Transaction) -> bool:
        """Check that every input spends an existing output owned and signed by its key."""
        message_hash = tx.calculate_hash()
        for tx_in in tx.inputs:
            key = _key(tx_in.prev_tx_id, tx_in.output_index)
            utxo = self._utxos.get(key)
            if utxo is None:
                logger.warning("UTXO not found for input key: %s", key)
                return False
            if utxo.recipient != tx_in.public_key:
                logger.warning("Public key does not match UTXO owner")
                return False
            if not verify_signature(tx_in.public_key, message_hash, tx_in.signature):
                logger.warning("Signature verification failed")
                return False
        return True

    def get_utxo(self, txid: str, index: int) -> TxOut | None:
        """Return the unspent output ``txid:index``, or None if it is spent or unknown."""
        return self._utxos.get(_key(txid, index))