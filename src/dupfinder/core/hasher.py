"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements full-content file hashing with pluggable hash algorithms.

Digests are used as a content-identity proxy only. Neither MD5 nor xxHash64
resists deliberately crafted collisions, so results must not be trusted on
adversarial input (e.g. files uploaded by untrusted users).
"""

import hashlib
import logging

import xxhash

from dupfinder.core.errors import SizeMismatchError
from dupfinder.core.interfaces import Hasher, HashAlgorithm, HashState
from dupfinder.core.models import HashAlgorithmName, DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class MD5AlgorithmImpl(HashAlgorithm):
    name = "md5"

    @staticmethod
    def new() -> HashState:
        return hashlib.md5(usedforsecurity=False)


class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxhash"

    @staticmethod
    def new() -> HashState:
        return xxhash.xxh64()


_ALGORITHMS = {
    HashAlgorithmName.MD5: MD5AlgorithmImpl,
    HashAlgorithmName.XXHASH: XXHashAlgorithmImpl,
}


def get_algorithm(name: HashAlgorithmName) -> HashAlgorithm:
    """Returns the algorithm implementation for the given enum value."""
    try:
        return _ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name!r}") from None


class HasherImpl(Hasher):
    """
    Streams a whole file through the configured algorithm.
    The file handle never outlives a single compute_digest call.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or MD5AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_digest(self, path: str, expected_size: int) -> bytes:
        """
        Computes the digest of the entire file.

        Args:
            path: File to read
            expected_size: Size reported by metadata; must equal bytes read

        Returns:
            bytes: Raw digest

        Raises:
            OSError: If the file cannot be opened or read
            SizeMismatchError: If the byte count disagrees with expected_size
        """
        state = self.algorithm.new()
        bytes_read = 0
        with open(path, 'rb') as f:
            while True:
                chunk = f.read(self.chunk_size)
                if not chunk:
                    break
                state.update(chunk)
                bytes_read += len(chunk)

        if bytes_read != expected_size:
            raise SizeMismatchError(path, expected_size, bytes_read)

        return state.digest()
