"""End-to-end tests: setup, prove and verify."""

import pytest

from groth16.curve import G1, add, eq, multiply
from groth16.errors import InvalidWitnessError, LengthMismatchError, PairingCheckError
from groth16.examples import cubic_witness, product_witness
from groth16.keys import Proof, TrustedSetup
from groth16.prover import prove
from groth16.trusted_setup import setup
from groth16.verifier import public_inputs, verify

CUBIC_WITNESS = cubic_witness(3)


class TestSetup:
    def test_sizes(self, cubic_setup, cubic_qap) -> None:
        assert cubic_setup.power == cubic_qap.degree == 4
        assert len(cubic_setup.tau_G2) == 4
        assert len(cubic_setup.target_G1) == 4
        assert len(cubic_setup.K_gamma_G1) == cubic_qap.l + 1 == 2
        assert len(cubic_setup.K_delta_G1) == 4

    def test_first_tau_power_is_generator(self, cubic_setup) -> None:
        assert eq(cubic_setup.tau_G1[0], G1)

    def test_verification_key_subset(self, cubic_setup) -> None:
        vk = cubic_setup.verification_key()
        assert vk.alpha_G1 is cubic_setup.alpha_G1
        assert vk.beta_G2 is cubic_setup.beta_G2
        assert vk.gamma_G2 is cubic_setup.gamma_G2
        assert vk.delta_G2 is cubic_setup.delta_G2
        assert vk.K_gamma_G1 is cubic_setup.K_gamma_G1
        assert vk.num_public_inputs == 1

    def test_no_secrets_kept(self, cubic_setup) -> None:
        for name in ("tau", "alpha", "beta", "gamma", "delta"):
            assert not hasattr(cubic_setup, name)


class TestCompleteness:
    def test_cubic(self, cubic_proof) -> None:
        proof, vk = cubic_proof
        assert verify(proof, [3], vk)

    def test_public_inputs_helper(self, cubic_qap) -> None:
        assert public_inputs(cubic_qap, CUBIC_WITNESS) == [3]

    def test_second_witness_same_setup(self, cubic_setup, cubic_qap) -> None:
        witness = cubic_witness(5)
        proof, vk = prove(cubic_setup, cubic_qap, witness)
        assert verify(proof, public_inputs(cubic_qap, witness), vk)

    def test_self_check(self, cubic_setup, cubic_qap) -> None:
        proof, vk = prove(cubic_setup, cubic_qap, CUBIC_WITNESS, check_proof=True)
        assert isinstance(proof, Proof)

    def test_proofs_are_randomized(self, cubic_setup, cubic_qap, cubic_proof) -> None:
        proof, _ = prove(cubic_setup, cubic_qap, CUBIC_WITNESS)
        assert not eq(proof.A, cubic_proof[0].A)

    def test_single_constraint_circuit(self, product_qap) -> None:
        trusted = setup(product_qap)
        assert len(trusted.target_G1) == 1
        proof, vk = prove(trusted, product_qap, product_witness(6, 7), check_proof=True)
        assert verify(proof, [6], vk)
        assert not verify(proof, [7], vk)


class TestSoundness:
    def test_wrong_public_input(self, cubic_proof) -> None:
        proof, vk = cubic_proof
        assert not verify(proof, [4], vk)

    @pytest.mark.parametrize("field", ["A", "C"])
    def test_tampered_g1_element(self, cubic_proof, field) -> None:
        proof, vk = cubic_proof
        tampered = proof._replace(**{field: add(getattr(proof, field), G1)})
        assert not verify(tampered, [3], vk)

    def test_tampered_b(self, cubic_proof, cubic_setup) -> None:
        proof, vk = cubic_proof
        tampered = proof._replace(B=add(proof.B, cubic_setup.tau_G2[0]))
        assert not verify(tampered, [3], vk)

    def test_swapped_a_and_c(self, cubic_proof) -> None:
        proof, vk = cubic_proof
        assert not verify(Proof(proof.C, proof.A, proof.B), [3], vk)

    def test_off_curve_point(self, cubic_proof) -> None:
        """A coordinate edit takes A off the curve; verify rejects instead of raising."""
        proof, vk = cubic_proof
        x, y, z = proof.A
        assert not verify(proof._replace(A=(x, y + 1, z)), [3], vk)

    def test_scaled_proof(self, cubic_proof) -> None:
        proof, vk = cubic_proof
        assert not verify(proof._replace(C=multiply(proof.C, 2)), [3], vk)


class TestErrors:
    def test_wrong_public_input_count(self, cubic_proof) -> None:
        proof, vk = cubic_proof
        with pytest.raises(LengthMismatchError):
            verify(proof, [3, 35], vk)
        with pytest.raises(LengthMismatchError):
            verify(proof, [], vk)

    def test_self_check_catches_bad_setup(self, cubic_setup, cubic_qap) -> None:
        """A corrupted public query point makes the prover's own check fail."""
        s = cubic_setup
        corrupted = TrustedSetup(
            s.tau_G1,
            s.tau_G2,
            s.alpha_G1,
            s.beta_G1,
            s.beta_G2,
            s.gamma_G2,
            s.delta_G1,
            s.delta_G2,
            [add(s.K_gamma_G1[0], G1)] + s.K_gamma_G1[1:],
            s.K_delta_G1,
            s.target_G1,
        )
        with pytest.raises(PairingCheckError):
            prove(corrupted, cubic_qap, CUBIC_WITNESS, check_proof=True)

    def test_prove_invalid_witness(self, cubic_setup, cubic_qap) -> None:
        with pytest.raises(InvalidWitnessError):
            prove(cubic_setup, cubic_qap, [3, 35, 9, 27, 31])

    def test_prove_wrong_witness_length(self, cubic_setup, cubic_qap) -> None:
        with pytest.raises(LengthMismatchError):
            prove(cubic_setup, cubic_qap, [3, 35, 9, 27])


class TestDemo:
    def test_main(self, capsys) -> None:
        from groth16.__main__ import main

        assert main(["--x", "2"]) == 0
        out = capsys.readouterr().out
        assert "out=15" in out
        assert "verify(x)     : True" in out
        assert "verify(x + 1) : False" in out

    def test_main_without_docstrings(self, capsys, monkeypatch) -> None:
        """Under python -OO module docstrings are None; the CLI must not rely on them."""
        import groth16.__main__ as demo

        monkeypatch.setattr(demo, "__doc__", None)
        assert demo.main(["--x", "3"]) == 0
        assert "verify(x)     : True" in capsys.readouterr().out
