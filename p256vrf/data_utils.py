"""
Persistence of VRF transcripts as JSON or YAML.
"""

from binascii import hexlify, unhexlify

import attr

from p256vrf.crypto import PublicParams


@attr.s
class VrfRecord(object):
    """A message with its VRF index and proof under a public key."""
    message = attr.ib()
    pk = attr.ib()
    index = attr.ib()
    proof = attr.ib()


def _hex(data):
    return hexlify(data).decode('ascii')


def load_records(source, format='json'):
    """
    :param source: File reader object
    :param format: One of ['json', 'yaml']
    :return: list of :py:class:`VrfRecord`
    """
    if format == "yaml":
        import yaml
        raw_data = yaml.safe_load(source)
    elif format == "json":
        import json
        raw_data = json.load(source)
    else:
        raise ValueError("Unknown format %s" % format)

    pp = PublicParams.get_default()
    records = []
    for item in raw_data:
        records.append(VrfRecord(
            message=unhexlify(item['message']),
            pk=pp.decode_point(unhexlify(item['pk'])),
            index=unhexlify(item['index']),
            proof=unhexlify(item['proof'])))

    return records


def save_records(target, records, format='json'):
    """
    :param target: File writer object
    :param records: Iterable of :py:class:`VrfRecord`
    :param format: One of ['json', 'yaml']
    """
    pp = PublicParams.get_default()
    out = []
    for record in records:
        out.append(dict(
            message=_hex(record.message),
            pk=_hex(pp.encode_point(record.pk)),
            index=_hex(record.index),
            proof=_hex(record.proof)))

    if format == "yaml":
        import yaml
        yaml.safe_dump(out, target)
    elif format == "json":
        import json
        json.dump(out, target)
    else:
        raise ValueError("Unknown format %s" % format)
