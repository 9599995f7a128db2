import hashlib

import pytest

from cspnet.sha1 import DIGEST_SIZE, Sha1, sha1_memory


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"abc",
        b"a" * 55,
        b"a" * 56,
        b"a" * 64,
        b"a" * 119,
        bytes(range(256)) * 5,
    ],
)
def test_matches_reference(data):
    assert sha1_memory(data) == hashlib.sha1(data).digest()


def test_known_digest_of_abc():
    assert sha1_memory(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_digest_size():
    assert len(sha1_memory(b"xyz")) == DIGEST_SIZE


def test_incremental_matches_one_shot():
    data = bytes(range(256)) * 3
    h = Sha1()
    h.update(data[:10]).update(data[10:130]).update(data[130:])
    assert h.digest() == sha1_memory(data)


def test_digest_does_not_disturb_state():
    h = Sha1()
    h.update(b"first part ")
    first = h.digest()
    assert h.digest() == first
    h.update(b"second part")
    assert h.digest() == hashlib.sha1(b"first part second part").digest()