import asyncio
import hashlib
import re
from pathlib import Path
from typing import BinaryIO

DIGEST_PREFIX = "0x"
DEFAULT_CHUNK_SIZE = 1024 * 1024

_DIGEST_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


def fingerprint(data: bytes) -> str:
    """Return the SHA-256 digest of ``data`` as ``0x`` + 64 lowercase hex chars."""
    return DIGEST_PREFIX + hashlib.sha256(data).hexdigest()


async def fingerprint_stream(
    stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> str:
    """Hash a binary stream chunk by chunk, yielding to the loop between chunks."""
    hasher = hashlib.sha256()
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        hasher.update(chunk)
        await asyncio.sleep(0)
    return DIGEST_PREFIX + hasher.hexdigest()


async def fingerprint_file(path: Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Fingerprint a file on disk.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with path.open("rb") as stream:
        return await fingerprint_stream(stream, chunk_size)


def is_digest(value: str) -> bool:
    return bool(_DIGEST_RE.match(value))


def digests_equal(left: str, right: str) -> bool:
    # Ledger-returned hex casing is not guaranteed to match local output.
    return left.strip().lower() == right.strip().lower()
