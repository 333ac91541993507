from typing import NamedTuple


class VerifierKey:
    def __init__(self, alpha_G1, beta_G2, gamma_G2, delta_G2, K_gamma_G1):
        self.alpha_G1 = alpha_G1
        self.beta_G2 = beta_G2
        self.gamma_G2 = gamma_G2
        self.delta_G2 = delta_G2
        # [(beta*u_i(tau) + alpha*v_i(tau) + w_i(tau)) / gamma]_1 for i in 0..=l
        self.K_gamma_G1 = K_gamma_G1

    @property
    def num_public_inputs(self):
        """Public inputs a verifier supplies, i.e. without the constant slot."""
        return len(self.K_gamma_G1) - 1


class TrustedSetup:
    """
    Output of the circuit-specific setup. Everything here is public; the
    scalars it was derived from are not kept anywhere.
    """

    def __init__(
        self,
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
    ):
        self.tau_G1 = tau_G1
        self.tau_G2 = tau_G2
        self.alpha_G1 = alpha_G1
        self.beta_G1 = beta_G1
        self.beta_G2 = beta_G2
        self.gamma_G2 = gamma_G2
        self.delta_G1 = delta_G1
        self.delta_G2 = delta_G2
        self.K_gamma_G1 = K_gamma_G1
        self.K_delta_G1 = K_delta_G1
        # [tau^i * t(tau) / delta]_1
        self.target_G1 = target_G1

    @property
    def power(self):
        return len(self.tau_G1)

    def verification_key(self):
        return VerifierKey(
            self.alpha_G1,
            self.beta_G2,
            self.gamma_G2,
            self.delta_G2,
            self.K_gamma_G1,
        )


class Proof(NamedTuple):
    A: tuple
    C: tuple
    B: tuple
