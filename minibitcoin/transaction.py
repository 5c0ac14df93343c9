"""Transactions made of inputs that spend earlier outputs and new outputs."""

from __future__ import annotations

from dataclasses import dataclass, field

from .hashing import sha256


@dataclass
class TxIn:
    """A reference to an earlier output, with the spender's signature and key."""

    prev_tx_id: str
    output_index: int
    signature: str = ""
    public_key: str = ""


@dataclass(frozen=True)
class TxOut:
    """An amount paid to a recipient address (a public key in hex)."""

    recipient: str
    amount: float


@dataclass
class Transaction:
    """A transaction; its id is the hash of its contents at construction."""

    inputs: list[TxIn] = field(default_factory=list)
    outputs: list[TxOut] = field(default_factory=list)
    id: str = field(init=False)

    def __post_init__(self) -> None:
        self.inputs = list(self.inputs)
        self.outputs = list(self.outputs)
        self.id = self.calculate_hash()

    def calculate_hash(self) -> str:
        """Hash the spent outpoints and the outputs; signatures are excluded."""
        parts = [f"{tx_in.prev_tx_id}{tx_in.output_index}" for tx_in in self.inputs]
        parts.extend(f"{out.recipient}{out.amount:g}" for out in self.outputs)
        return sha256("".join(parts))

    @property
    def is_coinbase(self) -> bool:
        """True for a transaction with no inputs."""
        return not self.inputs