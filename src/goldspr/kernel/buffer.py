from typing import IO, Union

import deal

from goldspr.errors import Truncated

BufferLike = Union[bytes, bytearray, memoryview]


@deal.chain(
    deal.pre(lambda _: _.size >= 0),
    deal.raises(Truncated),
    deal.reason(Truncated, lambda _: len(_.buffer) != _.size),
    deal.has(),
)
def validate_buffer_size(buffer: BufferLike, size: int) -> BufferLike:
    if len(buffer) != size:
        raise Truncated(size, len(buffer))
    return buffer


@deal.pre(lambda _: _.size >= 0)
def read_exact(stream: IO[bytes], size: int) -> bytes:
    """Read exactly `size` bytes from stream, raise `Truncated` on early EOF."""
    return bytes(validate_buffer_size(stream.read(size), size))
