from io import BytesIO
from os import urandom

import cython

# Utterance ids are generated for every voice instruction of every step,
# so entropy is read from the OS in large chunks.
_REFILL_SIZE = 64 * 1024  # 64 KiB
_POOL = BytesIO()


@cython.cfunc
def _take(n: cython.Py_ssize_t) -> bytes:
    pool = _POOL
    chunks: list[bytes] = [pool.read(n)]
    missing: cython.Py_ssize_t = n - len(chunks[0])

    while missing > 0:
        pool.seek(0)
        pool.truncate()
        pool.write(urandom(_REFILL_SIZE))
        pool.seek(0)
        chunk: bytes = pool.read(missing)
        chunks.append(chunk)
        missing -= len(chunk)

    return b''.join(chunks)


def buffered_randbytes(n: int) -> bytes:
    """Generate a secure random byte string of length n."""
    return _take(n)
