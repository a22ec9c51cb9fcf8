import struct
from dataclasses import dataclass
from typing import IO, Callable, Generic, Protocol, Sequence, TypeVar, cast

from goldspr.errors import InvalidFieldValue

from .buffer import BufferLike, read_exact, validate_buffer_size

T_Struct = TypeVar('T_Struct')


class Structured(Protocol[T_Struct]):
    @property
    def size(self) -> int:
        ...

    def unpack(self, stream: IO[bytes]) -> T_Struct:
        ...

    def unpack_from(self, data: BufferLike, offset: int = 0) -> T_Struct:
        ...

    def pack(self, data: T_Struct) -> bytes:
        ...


@dataclass(frozen=True)
class StructuredTuple(Structured, Generic[T_Struct]):
    """Bind a fixed binary layout to a record type, field by field.

    _fields: attribute names, in layout order

    _structure: binary layout of the record

    _factory: record constructor, called with the fields as keywords
    """

    _fields: Sequence[str]
    _structure: struct.Struct
    _factory: Callable[..., T_Struct]

    @property
    def size(self) -> int:
        return self._structure.size

    def unpack(self, stream: IO[bytes]) -> T_Struct:
        return self.unpack_from(read_exact(stream, self.size))

    def unpack_from(self, data: BufferLike, offset: int = 0) -> T_Struct:
        validate_buffer_size(data[offset : offset + self.size], self.size)
        factory = cast(Callable[..., T_Struct], self._factory)
        values = self._structure.unpack_from(data, offset)
        return factory(**dict(zip(self._fields, values)))

    def pack(self, data: T_Struct) -> bytes:
        try:
            return self._structure.pack(*[getattr(data, field) for field in self._fields])
        except (struct.error, OverflowError) as exc:
            raise InvalidFieldValue(data, str(exc)) from exc
