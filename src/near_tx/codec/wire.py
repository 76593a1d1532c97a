"""
Wire model base class.

Every entity that travels on the wire derives from WireModel: an immutable
pydantic model with its own static serialize/deserialize pair. There is no
shared schema table; each type writes and reads its own fields in declared
order.
"""

from typing import Any, ClassVar, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from .reader import BinaryReader
from .writer import BinaryWriter
from ..runtime.errors import InvalidVariant, UnknownDiscriminant

W = TypeVar("W", bound="WireModel")


class WireModel(BaseModel):
    """Immutable value object with a canonical binary encoding."""

    model_config = ConfigDict(frozen=True)

    def serialize(self, writer: BinaryWriter) -> None:
        """Write this value's fields to ``writer`` in declared order."""
        raise NotImplementedError(f"{type(self).__name__} does not define serialize()")

    @classmethod
    def deserialize(cls: Type[W], reader: BinaryReader) -> W:
        """Read one value of this type from ``reader``."""
        raise NotImplementedError(f"{cls.__name__} does not define deserialize()")

    def encode(self) -> bytes:
        """Canonical encoding of this value."""
        return encode(self)

    @classmethod
    def decode(cls: Type[W], data: bytes) -> W:
        """Decode a complete value of this type; trailing bytes are an error."""
        return decode(cls, data)


def encode(obj: WireModel) -> bytes:
    """
    Encode an entity to its canonical bytes.

    Args:
        obj: Entity to encode

    Returns:
        Canonical binary encoding

    Raises:
        ValueOutOfRange: If a numeric or fixed-width field does not fit
    """
    writer = BinaryWriter()
    obj.serialize(writer)
    return writer.to_bytes()


def decode(cls: Type[W], data: bytes) -> W:
    """
    Decode a top-level entity of type ``cls`` from ``data``.

    Args:
        cls: Entity type to decode
        data: Encoded bytes

    Returns:
        Decoded entity

    Raises:
        TruncatedInput: If the input ends before a field is complete
        TrailingBytes: If bytes remain after the entity
        UnknownDiscriminant: If a union tag is out of range
    """
    reader = BinaryReader(data)
    value = cls.deserialize(reader)
    reader.ensure_consumed()
    return value


class WireUnion(WireModel):
    """
    Base of a tagged union whose variants are its subclasses.

    A union value is always exactly one variant instance, so more than one
    populated alternative cannot be expressed. The discriminant is the
    variant's position in the root's ``variants()`` tuple.
    """

    kind: ClassVar[str] = ""

    @model_validator(mode="before")
    @classmethod
    def _require_variant(cls, data: Any) -> Any:
        _reject_bare_union(cls)
        return data

    @classmethod
    def variants(cls) -> Tuple[Type["WireUnion"], ...]:
        """Variant classes in declaration (wire) order."""
        raise NotImplementedError(f"{cls.__name__} does not declare its variants")

    @classmethod
    def from_variant(cls, **alternatives: Any) -> "WireUnion":
        """
        Select a variant by name, e.g. ``Action.from_variant(transfer=t)``.

        Raises:
            InvalidVariant: If zero or several alternatives are given, the name
                is unknown, or the value is not an instance of that variant
        """
        if len(alternatives) != 1:
            raise InvalidVariant(
                f"{cls.__name__} takes exactly one variant, got {len(alternatives)}",
                details={"given": sorted(alternatives)},
            )
        ((name, value),) = alternatives.items()
        by_kind = {variant.kind: variant for variant in cls.variants()}
        expected = by_kind.get(name)
        if expected is None:
            raise InvalidVariant(
                f"Unknown {cls.__name__} variant: {name}",
                details={"variants": sorted(by_kind)},
            )
        if type(value) is not expected:
            raise InvalidVariant(
                f"Variant {name} expects {expected.__name__}, got {type(value).__name__}"
            )
        return value

    @property
    def discriminant(self) -> int:
        """Tag byte written before the variant body."""
        return type(self).variants().index(type(self))

    def serialize(self, writer: BinaryWriter) -> None:
        writer.u8(self.discriminant)
        self.serialize_body(writer)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> "WireUnion":
        offset = reader.offset
        tag = reader.u8()
        variants = cls.variants()
        if tag >= len(variants):
            raise UnknownDiscriminant(
                f"{cls.__name__} discriminant {tag} at offset {offset} is out of range 0..{len(variants) - 1}",
                details={"offset": offset, "discriminant": tag},
            )
        variant = variants[tag]
        if not issubclass(variant, cls):
            raise UnknownDiscriminant(
                f"Discriminant {tag} ({variant.kind}) at offset {offset} is not a {cls.__name__}",
                details={"offset": offset, "discriminant": tag},
            )
        return variant.deserialize_body(reader)

    def serialize_body(self, writer: BinaryWriter) -> None:
        """Variant fields; variants without fields write nothing."""

    @classmethod
    def deserialize_body(cls, reader: BinaryReader) -> "WireUnion":
        return cls()


def _reject_bare_union(cls: type) -> None:
    if cls is WireUnion or WireUnion in cls.__bases__:
        raise InvalidVariant(f"{cls.__name__} needs exactly one variant, got none")
