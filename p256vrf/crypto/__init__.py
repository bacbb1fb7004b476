from .params import PublicParams, LocalParams, Keypair, random_scalar
from .utils import hash_to_point, hash_to_scalar
from .vrf import (VrfContainer, evaluate, proof_to_hash, compute_vrf,
                  verify_vrf)
