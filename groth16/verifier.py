import logging

from .curve import Z1, is_g1_point, is_g2_point, linear_combination, neg, pairing_check
from .errors import LengthMismatchError
from .field import prepend_one
from .keys import Proof, VerifierKey
from .qap import QAP

logger = logging.getLogger(__name__)


def verify(proof: Proof, public_inputs, vk: VerifierKey) -> bool:
    """
    Accept iff

        e(-A, B) * e(alpha, beta) * e(sum a_i K_gamma_i, gamma) * e(C, delta) == 1

    where a_0 = 1 and a_1..a_l are `public_inputs`. A public-input count that
    does not match the key raises LengthMismatchError; a proof that is merely
    wrong, including one whose points are off the curve, gives False.
    """
    w_pub = prepend_one(public_inputs)
    if len(w_pub) != len(vk.K_gamma_G1):
        raise LengthMismatchError(
            f"Invalid number of public inputs: expected {vk.num_public_inputs}, "
            f"got {len(public_inputs)}."
        )

    A, C, B = proof
    if not (is_g1_point(A) and is_g1_point(C) and is_g2_point(B)):
        logger.debug("proof rejected: element not on curve")
        return False

    Kw_gamma_G1 = linear_combination(vk.K_gamma_G1, w_pub, Z1)
    return pairing_check(
        [neg(A), vk.alpha_G1, Kw_gamma_G1, C],
        [B, vk.beta_G2, vk.gamma_G2, vk.delta_G2],
    )


def public_inputs(qap: QAP, witness):
    """The leading entries of a prover-side witness that the verifier sees."""
    return list(witness[: qap.l])
