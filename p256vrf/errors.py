"""
Exceptions raised by the VRF operations.
"""


class VrfError(ValueError):
    """Base class of all VRF errors."""


class HashToCurveExhausted(VrfError):
    """No curve point was found within the allowed number of attempts.

    Indicates broken group or hash parameters, never bad user input.
    """


class InvalidProof(VrfError):
    """The proof does not verify."""


class InvalidProofLength(InvalidProof):
    """The proof does not have the size fixed by the group."""


class InvalidPoint(InvalidProof):
    """The encoding is not a finite point of the group."""
