"""
Hash-to-point and hash-to-scalar maps.

Both are try-and-increment constructions over the wide hash: the input
is prefixed with a 4-byte big-endian counter, and the counter is bumped
until the truncated digest is acceptable.
"""

import logging

from petlib.bn import Bn
from petlib.ec import EcPt

from p256vrf.errors import HashToCurveExhausted
from p256vrf.utils.encodings import EVEN_Y_TAG, counter2bytes
from p256vrf.crypto.params import PublicParams


logger = logging.getLogger(__name__)


def hash_to_point(msg):
    """Hash a message to a point of the group (H1).

    The truncated digest is taken as an x-coordinate, and the point with
    that x and an even y is returned.

    :param bytes msg: Message to hash
    :raises: :py:class:`HashToCurveExhausted` if no attempt hits the curve
    """
    pp = PublicParams.get_default()
    G = pp.ec_group
    size = pp.scalar_size

    for i in range(pp.hash_to_point_attempts):
        digest = pp.wide_hash_func(counter2bytes(i) + msg).digest()
        try:
            pt = EcPt.from_binary(EVEN_Y_TAG + digest[:size], G)
        except Exception:
            # x is not the abscissa of a curve point
            continue
        if i > 0:
            logger.debug("hash_to_point succeeded after %d attempts", i + 1)
        return pt

    raise HashToCurveExhausted(
        "No curve point found in %d attempts" % pp.hash_to_point_attempts)


def hash_to_scalar(data):
    """Hash a byte string to a scalar in [1, order - 1] (H2).

    :param bytes data: Data to hash
    :return: ``petlib.bn.Bn``
    """
    pp = PublicParams.get_default()
    bound = pp.ec_group.order() - 1
    size = pp.scalar_size

    i = 0
    while True:
        digest = pp.wide_hash_func(counter2bytes(i) + data).digest()
        k = Bn.from_binary(digest[:size])
        if k < bound:
            if i > 0:
                logger.debug("hash_to_scalar succeeded after %d attempts",
                             i + 1)
            return k + 1
        i += 1
