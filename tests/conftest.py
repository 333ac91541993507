"""Shared fixtures. Trusted setups are expensive, so they are built once per session."""

import pytest

from groth16.examples import cubic_r1cs, cubic_witness, product_r1cs
from groth16.prover import prove
from groth16.trusted_setup import setup

CUBIC_WITNESS = [3, 35, 9, 27, 30]


@pytest.fixture(scope="session")
def cubic():
    return cubic_r1cs()


@pytest.fixture(scope="session")
def cubic_qap(cubic):
    return cubic.to_qap()


@pytest.fixture(scope="session")
def cubic_setup(cubic_qap):
    return setup(cubic_qap)


@pytest.fixture(scope="session")
def cubic_proof(cubic_setup, cubic_qap):
    """(proof, vk) for x = 3."""
    assert cubic_witness(3) == CUBIC_WITNESS
    return prove(cubic_setup, cubic_qap, CUBIC_WITNESS)


@pytest.fixture(scope="session")
def product_qap():
    return product_r1cs().to_qap()
