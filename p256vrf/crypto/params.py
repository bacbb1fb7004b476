"""
Group parameters and containers for VRF key material.
"""

import attr

from hashlib import sha256, sha512

from defaultcontext import with_default_context
from petlib.ec import EcGroup, EcPt

from p256vrf.utils.encodings import (pet2ascii, ascii2pet, bn2bytes,
                                     point2bytes, bytes2point)


#: OpenSSL identifier of NIST P-256 (prime256v1)
P256_NID = 415


@with_default_context(use_empty_init=True)
@attr.s
class PublicParams(object):
    """Public parameters of the system.

    :param ec_group: Prime-order group (NIST P-256 by default)
    :param hash_func: 256-bit hash used for the VRF index
    :param wide_hash_func: 512-bit hash used by the hash-to-point and
                           hash-to-scalar maps
    :param int hash_to_point_attempts: Bound of the try-and-increment loop
    """
    ec_group = attr.ib(default=attr.Factory(lambda: EcGroup(P256_NID)))
    hash_func = attr.ib(default=attr.Factory(lambda: sha256))
    wide_hash_func = attr.ib(default=attr.Factory(lambda: sha512))
    hash_to_point_attempts = attr.ib(default=100)

    @property
    def scalar_size(self):
        """Byte length of the group order."""
        return (self.ec_group.order().num_bits() + 7) // 8

    @property
    def point_size(self):
        return 1 + 2 * self.scalar_size

    @property
    def proof_size(self):
        """Size of an encoded proof: challenge, response and output."""
        return 2 * self.scalar_size + self.point_size

    def encode_point(self, pt):
        return point2bytes(pt, self.scalar_size)

    def decode_point(self, data):
        return bytes2point(data, self.ec_group, self.scalar_size)

    def encode_scalar(self, bn):
        return bn2bytes(bn, self.scalar_size)


def random_scalar():
    """Draw a fresh secret scalar in [1, order).

    The only source of secret randomness in the package. Backed by the
    OpenSSL CSPRNG, which is safe to use from several threads.
    """
    pp = PublicParams.get_default()
    order = pp.ec_group.order()
    while True:
        k = order.random()
        if k != 0:
            return k


@attr.s
class Keypair(object):
    """Asymmetric key pair.

    :param pk: Public key
    :param sk: Private key
    """
    pk = attr.ib()
    sk = attr.ib(default=None, repr=False)

    @staticmethod
    def generate():
        """Generate a key pair."""
        return Keypair.from_secret(random_scalar())

    @staticmethod
    def from_secret(sk):
        """Rebuild the key pair of a known secret scalar.

        :param petlib.bn.Bn sk: Secret key in [1, order)
        """
        pp = PublicParams.get_default()
        G = pp.ec_group
        if not 0 < sk < G.order():
            raise ValueError('Secret key out of range.')
        return Keypair(sk=sk, pk=sk * G.generator())

    def export(self, private=False):
        """Export the keys as base58 strings."""
        pp = PublicParams.get_default()
        result = {'pk': pet2ascii(self.pk, pp.scalar_size)}
        if private and self.sk is not None:
            result['sk'] = pet2ascii(self.sk, pp.scalar_size)
        return result

    @staticmethod
    def from_dict(exported):
        pp = PublicParams.get_default()
        G = pp.ec_group
        pk = ascii2pet(exported['pk'], G, pp.scalar_size)
        if not isinstance(pk, EcPt):
            raise ValueError('Public key is not an encoded point.')
        sk = exported.get('sk')
        if sk is None:
            return Keypair(pk=pk)
        sk = ascii2pet(sk, G, pp.scalar_size)
        if isinstance(sk, EcPt):
            raise ValueError('Secret key is not an encoded scalar.')
        keypair = Keypair.from_secret(sk)
        if keypair.pk != pk:
            raise ValueError('Public key does not match the secret key.')
        return keypair


@with_default_context
@attr.s
class LocalParams(object):
    """VRF owner's cryptographic material.

    :param Keypair vrf: VRF key pair
    """
    vrf = attr.ib(default=None)

    @staticmethod
    def generate():
        """Generate a key pair."""
        return LocalParams(vrf=Keypair.generate())

    def public_export(self):
        """Export public keys to dictionary."""
        return self._export(private=False)

    def private_export(self):
        """Export public and private keys to dictionary."""
        return self._export(private=True)

    def _export(self, private=False):
        result = {}
        if self.vrf is not None:
            for key, value in self.vrf.export(private=private).items():
                result['vrf_' + key] = value
        return result

    @staticmethod
    def from_dict(exported):
        """Import from dictionary.

        :param dict exported: Exported params
        """
        if 'vrf_pk' not in exported:
            return LocalParams()
        keys = {'pk': exported['vrf_pk']}
        if 'vrf_sk' in exported:
            keys['sk'] = exported['vrf_sk']
        return LocalParams(vrf=Keypair.from_dict(keys))
