[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minibitcoin"
version = "0.1.0"
description = "A small educational blockchain with UTXO tracking, ECDSA-signed transactions, a mempool and proof-of-work mining"
requires-python = ">=3.10"
keywords = ["blockchain", "bitcoin", "utxo", "ecdsa", "secp256k1", "proof-of-work", "mempool"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minibitcoin = "minibitcoin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minibitcoin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
