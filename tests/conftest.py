from __future__ import annotations

from pathlib import Path

import pytest

from cryptokeys import create_default_factory
from cryptokeys.factory import KeyFactory
from cryptokeys.keys import PrivateKey

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="ascii")


@pytest.fixture(scope="session")
def factory() -> KeyFactory:
    return create_default_factory()


@pytest.fixture(scope="session")
def rsa_private(factory: KeyFactory) -> PrivateKey:
    return factory.generate_private_key("RSA")


@pytest.fixture(scope="session")
def other_rsa_private(factory: KeyFactory) -> PrivateKey:
    return factory.generate_private_key("RSA")


@pytest.fixture()
def legacy_pair_text() -> str:
    """X.509 public frame followed by the matching PKCS#1 private frame"""
    return read_fixture("x509_public.pem") + "\n" + read_fixture("pkcs1_private.pem")
