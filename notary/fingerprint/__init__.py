from notary.fingerprint.engine import (
    DIGEST_PREFIX,
    digests_equal,
    fingerprint,
    fingerprint_file,
    fingerprint_stream,
    is_digest,
)

__all__ = [
    "DIGEST_PREFIX",
    "digests_equal",
    "fingerprint",
    "fingerprint_file",
    "fingerprint_stream",
    "is_digest",
]
