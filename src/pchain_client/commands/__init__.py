"""
Command implementations for the pchain client.

Each module corresponds to a top-level CLI command group:
- parse:  base64 encoding, call result decoding, call argument encoding
- config: fullnode RPC URL setup
"""
