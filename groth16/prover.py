import logging

from .curve import Z1, Z2, add, linear_combination, multiply, neg, pairing_check
from .errors import PairingCheckError
from .field import prepend_one, random_scalar
from .keys import Proof, TrustedSetup
from .qap import QAP, quotient, solution_polynomials, vanishing

logger = logging.getLogger(__name__)


def prove(setup: TrustedSetup, qap: QAP, witness, check_proof=False):
    """
    Compute a Groth16 proof that `witness` satisfies `qap`.

    `witness` lists every variable except the constant-1 slot, public ones
    first. With `check_proof` the proof is run through the verification
    pairing check before being returned, costing one extra multi-pairing.

    Returns (proof, verification key).
    """
    # proof blinding, fresh for every proof
    r = random_scalar()
    s = random_scalar()

    w = prepend_one(witness)
    au, av, ht = solution_polynomials(w, qap)
    w_priv = w[qap.l + 1 :]

    # [alpha + sum a_i u_i(tau) + r*delta]_1
    A_G1 = linear_combination(setup.tau_G1, au, Z1)
    A_G1 = add(A_G1, setup.alpha_G1)
    A_G1 = add(A_G1, multiply(setup.delta_G1, r))

    # [beta + sum a_i v_i(tau) + s*delta]_2
    B_G2 = linear_combination(setup.tau_G2, av, Z2)
    B_G2 = add(B_G2, setup.beta_G2)
    B_G2 = add(B_G2, multiply(setup.delta_G2, s))

    # same in G1, only needed to blind C
    B_G1 = linear_combination(setup.tau_G1, av, Z1)
    B_G1 = add(B_G1, setup.beta_G1)
    B_G1 = add(B_G1, multiply(setup.delta_G1, s))

    h = quotient(ht, vanishing(qap.degree))
    HT_G1 = linear_combination(setup.target_G1, h, Z1)

    # [sum_{i>l} a_i (beta u_i(tau) + alpha v_i(tau) + w_i(tau)) / delta]_1
    Kw_delta_G1 = linear_combination(setup.K_delta_G1, w_priv, Z1)

    As_G1 = multiply(A_G1, s)
    Br_G1 = multiply(B_G1, r)
    rs_delta_G1 = multiply(setup.delta_G1, -r * s)

    C_G1 = add(Kw_delta_G1, HT_G1)
    C_G1 = add(C_G1, As_G1)
    C_G1 = add(C_G1, Br_G1)
    C_G1 = add(C_G1, rs_delta_G1)

    proof = Proof(A_G1, C_G1, B_G2)

    if check_proof:
        w_pub = w[: qap.l + 1]
        Kw_gamma_G1 = linear_combination(setup.K_gamma_G1, w_pub, Z1)
        ok = pairing_check(
            [neg(A_G1), setup.alpha_G1, Kw_gamma_G1, C_G1],
            [B_G2, setup.beta_G2, setup.gamma_G2, setup.delta_G2],
        )
        if not ok:
            raise PairingCheckError("Freshly generated proof does not verify.")
        logger.debug("proof passed its own pairing check")

    return proof, setup.verification_key()
