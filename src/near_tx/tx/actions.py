"""
Transaction actions.

Action is a tagged union of nine variants. The discriminant written on the
wire is the variant's position in ACTION_VARIANTS, so that order is part of
the protocol and must never change:

    0 CreateAccount    3 Transfer    6 DeleteKey
    1 DeployContract   4 Stake       7 DeleteAccount
    2 FunctionCall     5 AddKey      8 SignedDelegate

The delegate containers (NonDelegateAction, DelegateAction) live here too
because SignedDelegate is itself an Action.
"""

from typing import Any, Callable, ClassVar, Iterable, Tuple, Union

from pydantic import StrictInt, field_validator

from ..canonjson import dumps_canonical_bytes
from ..codec.reader import BinaryReader
from ..codec.wire import WireModel, WireUnion
from ..codec.writer import BinaryWriter
from ..runtime.errors import NestedDelegate
from .keys import BLOCK_HASH_LENGTH, PublicKey, Signature, check_block_hash
from .permissions import AccessKey


class Action(WireUnion):
    """Base of all transaction actions; instantiate one of the variants."""

    @classmethod
    def variants(cls):
        return ACTION_VARIANTS


class CreateAccount(Action):
    kind: ClassVar[str] = "createAccount"


class DeployContract(Action):
    kind: ClassVar[str] = "deployContract"

    code: bytes

    def serialize_body(self, writer: BinaryWriter) -> None:
        writer.len_prefixed_bytes(self.code)

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "DeployContract":
        return cls(code=reader.len_prefixed_bytes())


class FunctionCall(Action):
    """Call ``method_name`` on the receiver with ``args``, attaching ``gas`` and ``deposit``."""

    kind: ClassVar[str] = "functionCall"

    method_name: str
    args: bytes
    gas: StrictInt
    deposit: StrictInt

    def serialize_body(self, writer: BinaryWriter) -> None:
        writer.string(self.method_name)
        writer.len_prefixed_bytes(self.args)
        writer.u64le(self.gas)
        writer.u128le(self.deposit)

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "FunctionCall":
        method_name = reader.string()
        args = reader.len_prefixed_bytes()
        gas = reader.u64le()
        deposit = reader.u128le()
        return cls(method_name=method_name, args=args, gas=gas, deposit=deposit)


class Transfer(Action):
    kind: ClassVar[str] = "transfer"

    deposit: StrictInt

    def serialize_body(self, writer: BinaryWriter) -> None:
        writer.u128le(self.deposit)

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "Transfer":
        return cls(deposit=reader.u128le())


class Stake(Action):
    kind: ClassVar[str] = "stake"

    stake: StrictInt
    public_key: PublicKey

    def serialize_body(self, writer: BinaryWriter) -> None:
        writer.u128le(self.stake)
        self.public_key.serialize(writer)

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "Stake":
        stake = reader.u128le()
        return cls(stake=stake, public_key=PublicKey.deserialize(reader))


class AddKey(Action):
    kind: ClassVar[str] = "addKey"

    public_key: PublicKey
    access_key: AccessKey

    def serialize_body(self, writer: BinaryWriter) -> None:
        self.public_key.serialize(writer)
        self.access_key.serialize(writer)

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "AddKey":
        public_key = PublicKey.deserialize(reader)
        return cls(public_key=public_key, access_key=AccessKey.deserialize(reader))


class DeleteKey(Action):
    kind: ClassVar[str] = "deleteKey"

    public_key: PublicKey

    def serialize_body(self, writer: BinaryWriter) -> None:
        self.public_key.serialize(writer)

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "DeleteKey":
        return cls(public_key=PublicKey.deserialize(reader))


class DeleteAccount(Action):
    kind: ClassVar[str] = "deleteAccount"

    beneficiary_id: str

    def serialize_body(self, writer: BinaryWriter) -> None:
        writer.string(self.beneficiary_id)

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "DeleteAccount":
        return cls(beneficiary_id=reader.string())


class NonDelegateAction(WireModel):
    """
    An action allowed inside a delegate action.

    Encodes exactly like the wrapped action. A SignedDelegate is rejected,
    both when built and when decoded, so meta-transactions never nest.
    """

    action: Action

    @field_validator("action")
    @classmethod
    def _not_delegate(cls, v: Action) -> Action:
        if isinstance(v, SignedDelegate):
            raise NestedDelegate("A delegate action cannot wrap another delegate action")
        return v

    def serialize(self, writer: BinaryWriter) -> None:
        self.action.serialize(writer)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> "NonDelegateAction":
        offset = reader.offset
        action = Action.deserialize(reader)
        if isinstance(action, SignedDelegate):
            raise NestedDelegate(
                f"Nested delegate action at offset {offset}", details={"offset": offset}
            )
        return cls(action=action)


class DelegateAction(WireModel):
    """Batch of actions authorized by ``sender_id`` for submission by a relayer."""

    sender_id: str
    receiver_id: str
    actions: Tuple[NonDelegateAction, ...]
    nonce: StrictInt
    block_hash: bytes
    public_key: PublicKey

    @field_validator("actions", mode="before")
    @classmethod
    def _wrap_actions(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(a if isinstance(a, NonDelegateAction) else NonDelegateAction(action=a) for a in v)
        return v

    @field_validator("block_hash")
    @classmethod
    def _block_hash_width(cls, v: bytes) -> bytes:
        return check_block_hash(v)

    def serialize(self, writer: BinaryWriter) -> None:
        writer.string(self.sender_id)
        writer.string(self.receiver_id)
        writer.sequence(self.actions, lambda a: a.serialize(writer))
        writer.u64le(self.nonce)
        writer.fixed_bytes(self.block_hash, BLOCK_HASH_LENGTH)
        self.public_key.serialize(writer)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> "DelegateAction":
        sender_id = reader.string()
        receiver_id = reader.string()
        actions = reader.sequence(lambda: NonDelegateAction.deserialize(reader))
        nonce = reader.u64le()
        block_hash = reader.bytes(BLOCK_HASH_LENGTH)
        public_key = PublicKey.deserialize(reader)
        return cls(
            sender_id=sender_id,
            receiver_id=receiver_id,
            actions=actions,
            nonce=nonce,
            block_hash=block_hash,
            public_key=public_key,
        )

    def inner_actions(self) -> Tuple[Action, ...]:
        """The wrapped actions without their NonDelegateAction envelopes."""
        return tuple(a.action for a in self.actions)


class SignedDelegate(Action):
    """The delegate variant: a delegate action plus the sender's signature over it."""

    kind: ClassVar[str] = "delegate"

    delegate_action: DelegateAction
    signature: Signature

    def serialize_body(self, writer: BinaryWriter) -> None:
        self.delegate_action.serialize(writer)
        self.signature.serialize(writer)

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "SignedDelegate":
        delegate_action = DelegateAction.deserialize(reader)
        return cls(delegate_action=delegate_action, signature=Signature.deserialize(reader))


ACTION_VARIANTS = (
    CreateAccount,
    DeployContract,
    FunctionCall,
    Transfer,
    Stake,
    AddKey,
    DeleteKey,
    DeleteAccount,
    SignedDelegate,
)


def stringify_json_or_bytes(args: Any) -> bytes:
    """Bytes pass through unchanged; anything else becomes canonical UTF-8 JSON."""
    if isinstance(args, (bytes, bytearray, memoryview)):
        return bytes(args)
    return dumps_canonical_bytes(args)


def create_account() -> Action:
    return CreateAccount()


def deploy_contract(code: bytes) -> Action:
    return DeployContract(code=code)


def function_call(method_name: str, args: Union[bytes, Any], gas: int, deposit: int,
                  stringify: Callable[[Any], bytes] = stringify_json_or_bytes,
                  raw_args: bool = False) -> Action:
    """
    Constructs an action representing a contract method call.

    Args:
        method_name: Name of the method to call
        args: Either raw bytes passed as-is, or a JSON-compatible value that
            is serialized with ``stringify``
        gas: Maximum gas (u64) the call may use
        deposit: Amount (u128) attached to the call
        stringify: Converts structured args into bytes
        raw_args: The contract consumes args verbatim; skip ``stringify``

    Returns:
        FunctionCall action
    """
    if not raw_args:
        args = stringify(args)
    return FunctionCall(method_name=method_name, args=args, gas=gas, deposit=deposit)


def transfer(deposit: int) -> Action:
    return Transfer(deposit=deposit)


def stake(stake: int, public_key: PublicKey) -> Action:
    return Stake(stake=stake, public_key=public_key)


def add_key(public_key: PublicKey, access_key: AccessKey) -> Action:
    return AddKey(public_key=public_key, access_key=access_key)


def delete_key(public_key: PublicKey) -> Action:
    return DeleteKey(public_key=public_key)


def delete_account(beneficiary_id: str) -> Action:
    return DeleteAccount(beneficiary_id=beneficiary_id)


def signed_delegate(delegate_action: DelegateAction, signature: Signature) -> Action:
    return SignedDelegate(delegate_action=delegate_action, signature=signature)


def wrap_non_delegate(actions: Iterable[Action]) -> Tuple[NonDelegateAction, ...]:
    """
    Wrap actions for a delegate action.

    Raises:
        NestedDelegate: If any action is itself a delegate action
    """
    return tuple(NonDelegateAction(action=a) for a in actions)
