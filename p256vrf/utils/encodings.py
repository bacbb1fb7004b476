import struct

import six
from base58 import b58encode, b58decode
from petlib.bn import Bn
from petlib.ec import EcPt

from p256vrf.errors import InvalidPoint


UNCOMPRESSED_TAG = b"\x04"
EVEN_Y_TAG = b"\x02"


def ensure_binary(s):
    """Ensure the string is binary.

    >>> ensure_binary(b"test")
    b'test'
    >>> ensure_binary(u"test")
    b'test'
    >>> ensure_binary(bytearray(b"test"))
    b'test'
    """
    if isinstance(s, (bytearray, memoryview)):
        s = bytes(s)
    elif not isinstance(s, six.binary_type):
        s = s.encode('utf-8')
    return s


def bytes2ascii(s):
    """Encode bytes as ASCII string (base58).

    >>> bytes2ascii(b"test")
    '3yZe7d'
    """
    return b58encode(s).decode('ascii')


def ascii2bytes(s):
    """Decode base58 ASCII string as bytes.

    >>> ascii2bytes('3yZe7d')
    b'test'
    """
    return b58decode(s)


def counter2bytes(i):
    """Encode a try-and-increment counter as 4 big-endian bytes.

    >>> counter2bytes(1)
    b'\\x00\\x00\\x00\\x01'
    """
    return struct.pack(">I", i)


def bn2bytes(bn, size):
    """Encode a scalar as fixed-width big-endian bytes.

    :param petlib.bn.Bn bn: Non-negative scalar
    :param int size: Width in bytes
    """
    data = bn.binary()
    if len(data) > size:
        raise ValueError("Scalar does not fit in %d bytes" % size)
    return data.rjust(size, b"\x00")


def bytes2bn(data):
    """Decode big-endian bytes as a scalar."""
    return Bn.from_binary(data)


def point2bytes(pt, size):
    """Encode a point in uncompressed SEC1 form.

    :param petlib.ec.EcPt pt: Point
    :param int size: Width of a coordinate in bytes
    :raises: :py:class:`InvalidPoint` for the point at infinity
    """
    if pt.is_infinite():
        raise InvalidPoint("The point at infinity has no encoding")
    x, y = pt.get_affine()
    return UNCOMPRESSED_TAG + bn2bytes(x, size) + bn2bytes(y, size)


def bytes2point(data, group, size):
    """Decode an uncompressed SEC1 point.

    Only the canonical uncompressed form of a finite point of ``group``
    is accepted.

    :param bytes data: Encoded point
    :param petlib.ec.EcGroup group: Group the point must belong to
    :param int size: Width of a coordinate in bytes
    :raises: :py:class:`InvalidPoint`
    """
    if len(data) != 1 + 2 * size or data[:1] != UNCOMPRESSED_TAG:
        raise InvalidPoint("Not an uncompressed point encoding")
    try:
        pt = EcPt.from_binary(data, group)
    except Exception as e:
        raise InvalidPoint("Point is not on the curve") from e
    if pt.is_infinite() or not group.check_point(pt):
        raise InvalidPoint("Point is not on the curve")
    return pt


def pet2ascii(p, size):
    """Encode a petlib point or scalar as ASCII string (base58).

    Points use the uncompressed SEC1 form, scalars are ``size`` bytes wide.

    >>> from petlib.bn import Bn
    >>> pet2ascii(Bn(1), 4)
    '1112'
    """
    if isinstance(p, EcPt):
        return bytes2ascii(point2bytes(p, size))
    return bytes2ascii(bn2bytes(p, size))


def ascii2pet(s, group, size):
    """Decode base58 ASCII string to a petlib point or scalar.

    The kind of object is told apart by the length of the decoded bytes.

    >>> from petlib.bn import Bn
    >>> ascii2pet('1112', None, 4) == Bn(1)
    True
    """
    data = ascii2bytes(s)
    if len(data) == 1 + 2 * size:
        return bytes2point(data, group, size)
    if len(data) == size:
        return bytes2bn(data)
    raise ValueError("Not an encoded point or scalar")
