class Groth16Error(Exception):
    """Base class for every error raised by this package."""


class ConfigError(Groth16Error, ValueError):
    pass


class LengthMismatchError(Groth16Error, ValueError):
    """Two inputs that must line up (points/values, witness/QAP, inputs/key) do not."""


class InvalidWitnessError(Groth16Error, ValueError):
    """The witness does not satisfy the constraint system."""


class PairingCheckError(Groth16Error, RuntimeError):
    """A freshly generated proof failed its own pairing check."""


class DivisionByZeroError(Groth16Error, ZeroDivisionError):
    pass


class SerializationError(Groth16Error, ValueError):
    pass
