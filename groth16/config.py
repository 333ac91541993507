import os

from .errors import ConfigError

DEFAULT_CURVE = "bn128"

# primitive element of the scalar field F_r for each supported curve, handed to
# galois so it does not have to factor r - 1
PRIMITIVE_ELEMENTS = {
    "bn128": 5,
    "bls12_381": 7,
}

CURVE = os.environ.get("GROTH16_CURVE", DEFAULT_CURVE).strip().lower()
if CURVE not in PRIMITIVE_ELEMENTS:
    raise ConfigError(
        f"Unsupported curve '{CURVE}', expected one of {sorted(PRIMITIVE_ELEMENTS)}."
    )

LOG_LEVEL = os.environ.get("GROTH16_LOG_LEVEL", "WARNING").upper()
