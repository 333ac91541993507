import logging

from .curve import G1, G2, multiply
from .field import FP, random_scalar
from .keys import TrustedSetup
from .poly import evaluate
from .qap import QAP, vanishing

logger = logging.getLogger(__name__)


def setup(qap: QAP) -> TrustedSetup:
    """
    Circuit-specific trusted setup.

    tau, alpha, beta, gamma and delta are toxic waste: anyone holding them can
    forge proofs for this circuit. They exist only as locals of this function,
    are never logged or returned, and are dropped before it returns.
    """
    degree = qap.degree

    # generating toxic waste
    tau = random_scalar()
    alpha = random_scalar()
    beta = random_scalar()
    gamma = random_scalar()
    delta = random_scalar()

    gamma_inv = FP(1) / gamma
    delta_inv = FP(1) / delta

    # beta*u_i + alpha*v_i + w_i, one combined polynomial per witness slot
    K = beta * qap.u + alpha * qap.v + qap.w
    K_eval = [evaluate(k, tau) for k in K]
    K_gamma = [k * gamma_inv for k in K_eval[: qap.l + 1]]
    K_delta = [k * delta_inv for k in K_eval[qap.l + 1 :]]

    tau_powers = [tau**i for i in range(degree)]
    T_tau = evaluate(vanishing(degree), tau)
    pow_tauTtau_div_delta = [t * T_tau * delta_inv for t in tau_powers]

    # generating SRS
    tau_G1 = [multiply(G1, t) for t in tau_powers]
    tau_G2 = [multiply(G2, t) for t in tau_powers]
    alpha_G1 = multiply(G1, alpha)
    beta_G1 = multiply(G1, beta)
    beta_G2 = multiply(G2, beta)
    gamma_G2 = multiply(G2, gamma)
    delta_G1 = multiply(G1, delta)
    delta_G2 = multiply(G2, delta)
    K_gamma_G1 = [multiply(G1, k) for k in K_gamma]
    K_delta_G1 = [multiply(G1, k) for k in K_delta]
    target_G1 = [multiply(G1, pTd) for pTd in pow_tauTtau_div_delta]

    del tau, alpha, beta, gamma, delta, gamma_inv, delta_inv
    del K, K_eval, K_gamma, K_delta, tau_powers, T_tau, pow_tauTtau_div_delta

    logger.debug(
        "setup done: %d tau powers, %d public and %d private query points",
        degree,
        len(K_gamma_G1),
        len(K_delta_G1),
    )
    return TrustedSetup(
        tau_G1,
        tau_G2,
        alpha_G1,
        beta_G1,
        beta_G2,
        gamma_G2,
        delta_G1,
        delta_G2,
        K_gamma_G1,
        K_delta_G1,
        target_G1,
    )
