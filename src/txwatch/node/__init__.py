"""
Node - JSON-RPC client layer.

Envelope codec, the shared async client, and the node operations built on
it (transaction submission, account state, confirmation queries).
"""
