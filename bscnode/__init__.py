"""BNB Smart Chain hardfork schedules, chain specifications, Parlia head selection,
transaction environments and the Tendermint secp256k1 recover precompile."""

__version__ = "0.1.0"