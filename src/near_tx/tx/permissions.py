"""
Access key permissions.

An access key either grants full access to the account or only allows
function calls to one receiver, optionally limited to a method list and a
gas allowance.
"""

from typing import ClassVar, Optional, Sequence, Tuple

from pydantic import StrictInt

from ..codec.reader import BinaryReader
from ..codec.wire import WireModel, WireUnion
from ..codec.writer import BinaryWriter


class AccessKeyPermission(WireUnion):
    """Permission union: FunctionCallPermission (0) or FullAccessPermission (1)."""

    @classmethod
    def variants(cls):
        return PERMISSION_VARIANTS


class FunctionCallPermission(AccessKeyPermission):
    """Key may only call methods on ``receiver_id``; empty ``method_names`` allows any method."""

    kind: ClassVar[str] = "functionCall"

    allowance: Optional[StrictInt] = None
    receiver_id: str
    method_names: Tuple[str, ...] = ()

    def serialize_body(self, writer: BinaryWriter) -> None:
        writer.option(self.allowance, writer.u128le)
        writer.string(self.receiver_id)
        writer.sequence(self.method_names, writer.string)

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "FunctionCallPermission":
        allowance = reader.option(reader.u128le)
        receiver_id = reader.string()
        method_names = reader.sequence(reader.string)
        return cls(allowance=allowance, receiver_id=receiver_id, method_names=method_names)


class FullAccessPermission(AccessKeyPermission):
    """Key may sign any action."""

    kind: ClassVar[str] = "fullAccess"


PERMISSION_VARIANTS = (FunctionCallPermission, FullAccessPermission)


class AccessKey(WireModel):
    """Access key attached to an account by AddKey."""

    nonce: StrictInt = 0
    permission: AccessKeyPermission

    def serialize(self, writer: BinaryWriter) -> None:
        writer.u64le(self.nonce)
        self.permission.serialize(writer)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> "AccessKey":
        nonce = reader.u64le()
        return cls(nonce=nonce, permission=AccessKeyPermission.deserialize(reader))


def full_access_key() -> AccessKey:
    """Access key with full access and nonce 0."""
    return AccessKey(nonce=0, permission=FullAccessPermission())


def function_call_access_key(receiver_id: str, method_names: Sequence[str],
                             allowance: Optional[int] = None) -> AccessKey:
    """
    Access key limited to function calls on one contract.

    Args:
        receiver_id: Contract account the key may call
        method_names: Allowed methods, empty for any method
        allowance: Optional u128 amount the key may spend on gas

    Returns:
        AccessKey with nonce 0
    """
    permission = FunctionCallPermission(
        allowance=allowance, receiver_id=receiver_id, method_names=tuple(method_names)
    )
    return AccessKey(nonce=0, permission=permission)
