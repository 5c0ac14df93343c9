"""A small in-memory blockchain with UTXO tracking, signed transactions, a mempool and proof-of-work mining."""

__version__ = "0.1.0"