"""
JSON-friendly encoding of proofs and verification keys.

G1 points are [x, y] and G2 points [[x0, x1], [y0, y1]], affine coordinates as
decimal integers (hex strings with a 0x prefix are accepted on input). The
point at infinity is encoded as null.
"""
import json
from pathlib import Path

from .curve import (
    FQ,
    FQ2,
    Z1,
    Z2,
    is_g1_point,
    is_g2_point,
    is_infinity,
    normalize,
)
from .errors import SerializationError
from .keys import Proof, VerifierKey


def _to_int(value):
    if isinstance(value, str):
        value = value.strip()
        base = 16 if value.startswith("0x") else 10
        return int(value, base)
    return int(value)


def _fq_int(value):
    return int(getattr(value, "n", value))


def serialize_g1(point):
    if is_infinity(point):
        return None
    x, y = normalize(point)
    return [_fq_int(x), _fq_int(y)]


def serialize_g2(point):
    if is_infinity(point):
        return None
    x, y = normalize(point)
    return [
        [_fq_int(x.coeffs[0]), _fq_int(x.coeffs[1])],
        [_fq_int(y.coeffs[0]), _fq_int(y.coeffs[1])],
    ]


def _is_pair(value):
    return isinstance(value, (list, tuple)) and len(value) == 2


def deserialize_g1(coords):
    if coords is None:
        return Z1
    if not _is_pair(coords):
        raise SerializationError("G1 point must have two coordinates.")
    try:
        x, y = (_to_int(c) for c in coords)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Bad G1 coordinate: {e}") from e
    point = (FQ(x), FQ(y), FQ.one())
    if not is_g1_point(point):
        raise SerializationError("G1 point is not on the curve.")
    return point


def deserialize_g2(coords):
    if coords is None:
        return Z2
    if not _is_pair(coords) or not all(_is_pair(c) for c in coords):
        raise SerializationError("G2 point must have two FQ2 coordinates.")
    try:
        x_coeffs = [_to_int(c) for c in coords[0]]
        y_coeffs = [_to_int(c) for c in coords[1]]
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Bad G2 coordinate: {e}") from e
    point = (FQ2(x_coeffs), FQ2(y_coeffs), FQ2.one())
    if not is_g2_point(point):
        raise SerializationError("G2 point is not on the curve.")
    return point


def _require_key(data, key):
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a JSON object, got {type(data).__name__}.")
    if key not in data:
        raise SerializationError(f"Missing required key '{key}'.")
    return data[key]


def proof_to_dict(proof: Proof):
    return {
        "A": serialize_g1(proof.A),
        "C": serialize_g1(proof.C),
        "B": serialize_g2(proof.B),
    }


def proof_from_dict(data):
    return Proof(
        deserialize_g1(_require_key(data, "A")),
        deserialize_g1(_require_key(data, "C")),
        deserialize_g2(_require_key(data, "B")),
    )


def verification_key_to_dict(vk: VerifierKey):
    return {
        "alpha_g1": serialize_g1(vk.alpha_G1),
        "beta_g2": serialize_g2(vk.beta_G2),
        "gamma_g2": serialize_g2(vk.gamma_G2),
        "delta_g2": serialize_g2(vk.delta_G2),
        "K_gamma_g1": [serialize_g1(pt) for pt in vk.K_gamma_G1],
    }


def verification_key_from_dict(data):
    raw_K_gamma = _require_key(data, "K_gamma_g1")
    if not isinstance(raw_K_gamma, list) or not raw_K_gamma:
        raise SerializationError("K_gamma_g1 must be a non-empty list of points.")
    return VerifierKey(
        deserialize_g1(_require_key(data, "alpha_g1")),
        deserialize_g2(_require_key(data, "beta_g2")),
        deserialize_g2(_require_key(data, "gamma_g2")),
        deserialize_g2(_require_key(data, "delta_g2")),
        [deserialize_g1(pt) for pt in raw_K_gamma],
    )


def dump_json(data, path):
    path = Path(path)
    with path.open("w", encoding="utf-8") as outfile:
        json.dump(data, outfile, indent=2)


def load_json(path):
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as infile:
            return json.load(infile)
    except json.JSONDecodeError as e:
        raise SerializationError(f"{path} is not valid JSON: {e}") from e
