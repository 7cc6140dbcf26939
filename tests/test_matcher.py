from __future__ import annotations

import pytest

from cryptokeys.crypto.matcher import PROBE, match_asymmetric, match_encryption, match_symmetric
from cryptokeys.factory import KeyFactory
from cryptokeys.keys import PrivateKey


def test_probe_message() -> None:
    assert PROBE == b"Moky loves May Lee forever!"


@pytest.mark.slow
def test_asymmetric_pairs(rsa_private: PrivateKey, other_rsa_private: PrivateKey) -> None:
    own_public = rsa_private.get_public_key()
    other_public = other_rsa_private.get_public_key()
    assert match_asymmetric(rsa_private, own_public)
    assert not match_asymmetric(rsa_private, other_public)
    assert not match_asymmetric(other_rsa_private, own_public)
    assert own_public.matches(rsa_private)
    assert not own_public.matches(other_rsa_private)
    assert rsa_private != other_rsa_private


@pytest.mark.slow
def test_encryption_pairs(rsa_private: PrivateKey, other_rsa_private: PrivateKey) -> None:
    assert match_encryption(rsa_private.get_public_key(), rsa_private)
    assert not match_encryption(other_rsa_private.get_public_key(), rsa_private)
    assert not match_encryption(rsa_private.get_public_key(), other_rsa_private)


def test_symmetric_pairs(factory: KeyFactory) -> None:
    key = factory.generate_symmetric_key("AES")
    copy = factory.parse_symmetric_key(key.to_json())
    other = factory.generate_symmetric_key("AES")
    assert match_symmetric(key, key)
    assert match_symmetric(key, copy)
    assert not match_symmetric(key, other)
    assert not match_symmetric(other, key)


def test_symmetric_equality_by_behaviour(factory: KeyFactory) -> None:
    key = factory.generate_symmetric_key("AES")
    info = key.to_dict()
    del info["keySize"]
    same = factory.parse_symmetric_key(info)
    assert same is not None
    assert same.descriptor != key.descriptor
    assert same == key
