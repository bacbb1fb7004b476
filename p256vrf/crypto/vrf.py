"""
Verifiable random function over a prime-order elliptic-curve group.

The proof is a Fiat-Shamir transformed Chaum-Pedersen proof that the
VRF output and the public key share the same discrete logarithm with
respect to the hashed message and the generator.

Wire format of a proof (P-256 sizes)::

    challenge (32 bytes) | response (32 bytes) | output point (65 bytes)
"""

import logging

from attr import attrs, attrib
from petlib.ec import EcPt

from p256vrf.errors import InvalidProof, InvalidProofLength, InvalidPoint
from p256vrf.utils import ensure_binary, bytes2bn, profiled
from p256vrf.crypto.utils import hash_to_point, hash_to_scalar
from p256vrf.crypto.params import PublicParams, LocalParams, random_scalar


logger = logging.getLogger(__name__)


@attrs(frozen=True)
class VrfContainer(object):
    """VRF index (hash), proof and output point.

    :param bytes index: Hash of the encoded output point
    :param bytes proof: Exported VRF proof
    :param petlib.ec.EcPt output: VRF output point
    """
    index = attrib()
    proof = attrib()
    output = attrib(eq=False, repr=False)


def _challenge(pp, *points):
    """Fiat-Shamir challenge over the encoded transcript.

    Points may be given as petlib points or already encoded.
    """
    transcript = b"".join(
        p if isinstance(p, bytes) else pp.encode_point(p) for p in points)
    return hash_to_scalar(transcript)


def _decode_public_key(pp, pk):
    if isinstance(pk, EcPt):
        pk = pp.encode_point(pk)
    elif isinstance(pk, (bytes, bytearray, memoryview)):
        pk = bytes(pk)
    else:
        raise InvalidPoint("Public key is neither a point nor bytes")
    return pp.decode_point(pk)


@profiled
def evaluate(sk, message):
    """Compute the VRF of a message and a proof of its correctness.

    :param petlib.bn.Bn sk: VRF secret key
    :param bytes message: Message
    :return: :py:class:`VrfContainer`
    """
    pp = PublicParams.get_default()
    message = ensure_binary(message)

    G = pp.ec_group
    order = G.order()
    if not 0 < sk < order:
        raise ValueError('Secret key out of range.')

    g = G.generator()
    pk = sk * g
    z = hash_to_point(message)
    h = sk * z
    value = pp.encode_point(h)

    r = random_scalar()
    R = r * g
    Hr = r * z
    c = _challenge(pp, g, z, pk, value, R, Hr)
    s = r.mod_sub(c.mod_mul(sk, order), order)

    proof = pp.encode_scalar(c) + pp.encode_scalar(s) + value
    index = pp.hash_func(value).digest()
    return VrfContainer(index=index, proof=proof, output=h)


@profiled
def proof_to_hash(pk, message, proof):
    """Verify a VRF proof and return the VRF index.

    :param pk: VRF public key, as a point or in uncompressed encoding
    :type pk: petlib.ec.EcPt or bytes-like
    :param bytes message: Message
    :param proof: Proof as produced by :py:func:`evaluate`
    :return: The 32-byte VRF index
    :raises: :py:class:`InvalidProofLength`, :py:class:`InvalidPoint` or
             :py:class:`InvalidProof`
    """
    pp = PublicParams.get_default()
    message = ensure_binary(message)
    if not isinstance(proof, (bytes, bytearray, memoryview)):
        logger.debug("Rejecting proof: not a byte string")
        raise InvalidProof("Proof is not a byte string")
    proof = bytes(proof)

    if len(proof) != pp.proof_size:
        logger.debug("Rejecting proof: %d bytes instead of %d",
                     len(proof), pp.proof_size)
        raise InvalidProofLength(
            "Expected a %d-byte proof, got %d bytes"
            % (pp.proof_size, len(proof)))

    size = pp.scalar_size
    c = bytes2bn(proof[:size])
    s = bytes2bn(proof[size:2 * size])
    value = proof[2 * size:]

    G = pp.ec_group
    g = G.generator()
    try:
        h = pp.decode_point(value)
        pk = _decode_public_key(pp, pk)
    except InvalidPoint as e:
        logger.debug("Rejecting proof: %s", e)
        raise
    z = hash_to_point(message)

    R = s * g + c * pk
    Hr = s * z + c * h
    if R.is_infinite() or Hr.is_infinite():
        logger.debug("Rejecting proof: degenerate commitment")
        raise InvalidProof("Proof does not verify")

    c_prime = _challenge(pp, g, z, pk, value, R, Hr)
    if c_prime != c:
        logger.debug("Rejecting proof: challenge mismatch")
        raise InvalidProof("Proof does not verify")
    return pp.hash_func(value).digest()


def compute_vrf(message):
    """Compute the VRF with the key of the current local params.

    :param bytes message: Message
    :return: :py:class:`VrfContainer`
    """
    local_params = LocalParams.get_default()
    return evaluate(local_params.vrf.sk, message)


def verify_vrf(pk, vrf, message):
    """Check whether a VRF index and proof correspond to the message.

    :param petlib.ec.EcPt pk: VRF public key
    :param vrf: :py:class:`VrfContainer` or :py:class:`VrfRecord`
    :param bytes message: Message
    """
    try:
        index = proof_to_hash(pk, message, vrf.proof)
    except InvalidProof:
        return False
    return index == vrf.index
