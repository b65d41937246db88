"""
Unit tests for the hash registry and HasherImpl.
Verifies digest lengths, streaming correctness, state reset between files,
and that open/read/close failures surface as the matching error type.
"""
import hashlib
import pytest
from unittest import mock

import xxhash

from hashrename.core import hasher as hasher_module
from hashrename.core.errors import CloseError, OpenError, ReadError, UnsupportedAlgorithm
from hashrename.core.hasher import (
    DEFAULT_ALGORITHM, HasherImpl, available_algorithms, default_algorithm_name, get_algorithm,
    register_builtin_algorithms)
from hashrename.core.models import RenameParams

HAS_SHA512_256 = "sha512_256" in hashlib.algorithms_available


class _FakeFile:
    """File object whose read/close can be made to fail."""

    def __init__(self, chunks, read_error=None, close_error=None):
        self._chunks = list(chunks)
        self._read_error = read_error
        self._close_error = close_error
        self.closed = False

    def read(self, size=-1):
        if self._chunks:
            return self._chunks.pop(0)
        if self._read_error:
            raise self._read_error
        return b""

    def close(self):
        self.closed = True
        if self._close_error:
            raise self._close_error


class TestAlgorithmRegistry:
    """Test name → constructor/digest-length lookups."""

    @pytest.mark.parametrize("name, digest_size", [
        ("sha1", 20),
        ("sha256", 32),
        pytest.param("sha512_256", 32, marks=pytest.mark.skipif(not HAS_SHA512_256, reason="OpenSSL without sha512_256")),
        ("blake2b", 64),
        ("xxh64", 8),
        ("xxh128", 16),
    ])
    def test_digest_sizes(self, name, digest_size):
        """Each registered algorithm must report the digest length its state produces."""
        algorithm = get_algorithm(name)
        assert algorithm.digest_size == digest_size
        assert algorithm.hex_length == 2 * digest_size
        assert len(algorithm.new().digest()) == digest_size

    def test_unknown_name_raises_unsupported_algorithm(self):
        with pytest.raises(UnsupportedAlgorithm, match="md4"):
            get_algorithm("md4")

    def test_unsupported_algorithm_is_value_error(self):
        """Configuration errors are ValueErrors so generic validation code can catch them."""
        with pytest.raises(ValueError):
            get_algorithm("crc32")

    def test_available_algorithms_sorted_and_complete(self):
        names = available_algorithms()
        assert names == sorted(names)
        assert {"sha1", "sha256", DEFAULT_ALGORITHM, "xxh64", "xxh128"} <= set(names)

    def test_new_returns_independent_states(self):
        algorithm = get_algorithm("sha256")
        a = algorithm.new()
        b = algorithm.new()
        a.update(b"data")
        assert a.digest() != b.digest()


class TestDefaultAlgorithm:
    """The default hash must always be registered and produce 32-byte digests."""

    def test_default_is_registered(self):
        assert get_algorithm(DEFAULT_ALGORITHM).digest_size == 32
        assert default_algorithm_name() == DEFAULT_ALGORITHM

    def test_falls_back_to_sha256_when_openssl_lacks_sha512_256(self):
        without = set(hashlib.algorithms_available) - {"sha512_256"}

        with mock.patch.dict(hasher_module._REGISTRY, clear=True), \
                mock.patch("hashrename.core.hasher.hashlib.algorithms_available", without):
            register_builtin_algorithms()

            assert "sha512_256" not in available_algorithms()
            assert default_algorithm_name() == "sha256"
            params = RenameParams(patterns=["*"], hash_name=default_algorithm_name())
            assert params.algorithm.digest_size == 32

    @pytest.mark.skipif(not HAS_SHA512_256, reason="OpenSSL without sha512_256")
    def test_prefers_sha512_256_when_available(self):
        with mock.patch.dict(hasher_module._REGISTRY, clear=True):
            register_builtin_algorithms()

            assert default_algorithm_name() == "sha512_256"


class TestHasherImpl:
    """Test full-content hashing with a reusable per-worker state."""

    def test_matches_reference_digest(self, tmp_path):
        content = b"hello"
        path = tmp_path / "a.txt"
        path.write_bytes(content)

        hasher = HasherImpl(get_algorithm(DEFAULT_ALGORITHM))

        assert hasher.hash_file(str(path)) == hashlib.new(DEFAULT_ALGORITHM, content).digest()

    def test_streams_in_small_chunks(self, tmp_path):
        """Chunked reading must not change the digest."""
        content = bytes(range(256)) * 1000
        path = tmp_path / "big.bin"
        path.write_bytes(content)

        hasher = HasherImpl(get_algorithm("sha256"), chunk_size=7)

        assert hasher.hash_file(str(path)) == hashlib.sha256(content).digest()

    def test_state_is_reset_between_files(self, tmp_path):
        """Hashing B after A must give the same digest as hashing B alone."""
        a = tmp_path / "a"
        b = tmp_path / "b"
        a.write_bytes(b"first file")
        b.write_bytes(b"second file")

        shared = HasherImpl(get_algorithm("sha1"))
        shared.hash_file(str(a))
        after_a = shared.hash_file(str(b))

        fresh = HasherImpl(get_algorithm("sha1"))
        assert after_a == fresh.hash_file(str(b))
        assert after_a == hashlib.sha1(b"second file").digest()

    def test_xxhash_state_is_reset_in_place(self, tmp_path):
        a = tmp_path / "a"
        b = tmp_path / "b"
        a.write_bytes(b"A" * 100)
        b.write_bytes(b"B" * 100)

        hasher = HasherImpl(get_algorithm("xxh64"))
        hasher.hash_file(str(a))

        assert hasher.hash_file(str(b)) == xxhash.xxh64(b"B" * 100).digest()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty"
        path.write_bytes(b"")

        hasher = HasherImpl(get_algorithm("sha256"))

        assert hasher.hash_file(str(path)) == hashlib.sha256(b"").digest()

    def test_missing_file_raises_open_error(self, tmp_path):
        missing = tmp_path / "gone.txt"
        hasher = HasherImpl(get_algorithm("sha256"))

        with pytest.raises(OpenError) as excinfo:
            hasher.hash_file(str(missing))

        assert excinfo.value.path == str(missing)
        assert isinstance(excinfo.value.cause, FileNotFoundError)
        assert str(excinfo.value).startswith("couldn't open:")

    def test_directory_raises_open_error(self, tmp_path):
        hasher = HasherImpl(get_algorithm("sha256"))

        with pytest.raises(OpenError):
            hasher.hash_file(str(tmp_path))

    def test_read_failure_raises_read_error_and_closes(self):
        fake = _FakeFile([b"partial"], read_error=OSError(5, "Input/output error"))
        hasher = HasherImpl(get_algorithm("sha256"))

        with mock.patch("hashrename.core.hasher.open", create=True, return_value=fake):
            with pytest.raises(ReadError, match="couldn't read"):
                hasher.hash_file("flaky.bin")

        assert fake.closed

    def test_read_failure_discards_partial_state(self, tmp_path):
        """After a failed read, the next file must hash as if nothing came before."""
        fake = _FakeFile([b"partial"], read_error=OSError(5, "Input/output error"))
        hasher = HasherImpl(get_algorithm("sha256"))
        with mock.patch("hashrename.core.hasher.open", create=True, return_value=fake):
            with pytest.raises(ReadError):
                hasher.hash_file("flaky.bin")

        good = tmp_path / "good"
        good.write_bytes(b"good")
        assert hasher.hash_file(str(good)) == hashlib.sha256(b"good").digest()

    def test_read_error_reported_even_if_close_also_fails(self):
        fake = _FakeFile([], read_error=OSError(5, "EIO"), close_error=OSError(5, "close EIO"))
        hasher = HasherImpl(get_algorithm("sha256"))

        with mock.patch("hashrename.core.hasher.open", create=True, return_value=fake):
            with pytest.raises(ReadError):
                hasher.hash_file("flaky.bin")

    def test_close_failure_raises_close_error(self):
        """A failing close is a failure of the file even though the read succeeded."""
        fake = _FakeFile([b"all content"], close_error=OSError(28, "No space left on device"))
        hasher = HasherImpl(get_algorithm("sha256"))

        with mock.patch("hashrename.core.hasher.open", create=True, return_value=fake):
            with pytest.raises(CloseError, match="couldn't close"):
                hasher.hash_file("closing.bin")
