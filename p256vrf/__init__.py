# The p256vrf package

import logging

from .errors import (VrfError, HashToCurveExhausted, InvalidProof,
                     InvalidProofLength, InvalidPoint)
from .crypto import (PublicParams, LocalParams, Keypair, VrfContainer,
                     evaluate, proof_to_hash, compute_vrf, verify_vrf)


logging.getLogger(__name__).addHandler(logging.NullHandler())
