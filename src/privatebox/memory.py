"""Best-effort wiping of secret buffers."""

from contextlib import contextmanager
from typing import Iterator, Union

from nacl._sodium import ffi, lib


def wipe(buf: Union[bytearray, memoryview]) -> None:
    """
    Overwrite a mutable buffer with zeros using sodium_memzero.

    libsodium clears the buffer's own memory, so no copy is left behind.
    Immutable ``bytes`` cannot be cleared and are ignored; callers that
    need a secret wiped must hold it in a bytearray.
    """
    if not isinstance(buf, (bytearray, memoryview)):
        return
    if isinstance(buf, memoryview) and buf.readonly:
        return
    n = buf.nbytes if isinstance(buf, memoryview) else len(buf)
    if n == 0:
        return
    lib.sodium_memzero(ffi.from_buffer(buf), n)


@contextmanager
def secret_buffer(initial: Union[bytes, bytearray, memoryview, int]) -> Iterator[bytearray]:
    """
    Yield a bytearray that is wiped when the block exits, however it exits.

    Args:
        initial: Either the size of a zero-filled buffer or bytes to copy in

    Yields:
        The mutable buffer
    """
    buf = bytearray(initial)
    try:
        yield buf
    finally:
        wipe(buf)
