__version__ = "0.3.0"

__all__ = [
    # Envelope codec
    "JSONRPC_VERSION",
    "RpcSuccess",
    "RpcFailure",
    "RpcError",
    "build_request",
    "decode_response",
    # Client
    "RpcClient",
    "open_client",
    # Operations
    "send_tx",
    "account_info",
    "ethop_info",
    "tx_info",
    "wait_for_verified",
    "wait_for_ethop",
    # Errors
    "RpcClientError",
    "TransportError",
    "ProtocolFailure",
    "MalformedResponseError",
    "SerializationError",
    # Models
    "AccountState",
    "BlockInfo",
    "ConfirmationStatus",
    "OpInfo",
    # Transactions / signatures
    "CanonicalTx",
    "PackedEthSignature",
    "SignedTransaction",
    "sign_eth_message",
    # Records
    "BlockType",
    "NewBlockEvent",
    "NewStorageState",
    "StoredBlockEvent",
    "StoredStorageState",
    "EventStore",
    "DuplicateBlockEventError",
]

from .node.calls import account_info, ethop_info, send_tx, tx_info
from .node.client import RpcClient, open_client
from .node.envelope import (
    JSONRPC_VERSION,
    RpcError,
    RpcFailure,
    RpcSuccess,
    build_request,
    decode_response,
)
from .node.errors import (
    MalformedResponseError,
    ProtocolFailure,
    RpcClientError,
    SerializationError,
    TransportError,
)
from .node.polling import wait_for_ethop, wait_for_verified
from .sigil.eth import PackedEthSignature, sign_eth_message
from .sigil.tx import CanonicalTx, SignedTransaction
from .wire.models import AccountState, BlockInfo, ConfirmationStatus, OpInfo
from .storage.records import (
    BlockType,
    NewBlockEvent,
    NewStorageState,
    StoredBlockEvent,
    StoredStorageState,
)
from .storage.store import DuplicateBlockEventError, EventStore
