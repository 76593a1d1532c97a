"""
Transaction model, builders and signing pipeline for near-tx.
"""

from .keys import (
    BLOCK_HASH_LENGTH, PUBLIC_KEY_LENGTH, SIGNATURE_LENGTH, KeyType, PublicKey, Signature,
)
from .permissions import (
    AccessKey, AccessKeyPermission, FullAccessPermission, FunctionCallPermission,
    full_access_key, function_call_access_key,
)
from .actions import (
    ACTION_VARIANTS, Action, AddKey, CreateAccount, DelegateAction, DeleteAccount, DeleteKey,
    DeployContract, FunctionCall, NonDelegateAction, SignedDelegate, Stake, Transfer,
    add_key, create_account, delete_account, delete_key, deploy_contract, function_call,
    signed_delegate, stake, stringify_json_or_bytes, transfer,
)
from .transaction import SignedTransaction, Transaction, create_transaction
from .delegate import (
    build_delegate_action, delegate_action, sign_delegate_action, verify_signed_delegate,
)
from .signing import build_and_sign_transaction, sign_transaction

__all__ = [
    # Keys
    "KeyType",
    "PublicKey",
    "Signature",
    "PUBLIC_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "BLOCK_HASH_LENGTH",

    # Permissions
    "AccessKey",
    "AccessKeyPermission",
    "FunctionCallPermission",
    "FullAccessPermission",
    "full_access_key",
    "function_call_access_key",

    # Actions
    "ACTION_VARIANTS",
    "Action",
    "CreateAccount",
    "DeployContract",
    "FunctionCall",
    "Transfer",
    "Stake",
    "AddKey",
    "DeleteKey",
    "DeleteAccount",
    "SignedDelegate",
    "NonDelegateAction",
    "DelegateAction",
    "create_account",
    "deploy_contract",
    "function_call",
    "transfer",
    "stake",
    "add_key",
    "delete_key",
    "delete_account",
    "signed_delegate",
    "stringify_json_or_bytes",

    # Transactions
    "Transaction",
    "SignedTransaction",
    "create_transaction",

    # Delegate actions
    "build_delegate_action",
    "delegate_action",
    "sign_delegate_action",
    "verify_signed_delegate",

    # Signing
    "sign_transaction",
    "build_and_sign_transaction",
]
