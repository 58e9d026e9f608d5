from .field import Fq, Fr  # BLS12-381 base/scalar fields
from .fq2 import Fq2  # quadratic extension (G2 coordinates)
from .fqp import Fq12, FqP  # generic polynomial extension, GT field
from .curve import G1, G2, Z1, Z2, add, double, eq, is_on_curve, mul, neg  # projective group law
from .pairing import pairing, pairing_check  # optimal-ate pairing
from .hash_to_curve import expand_message_xmd, hash_to_field_fq2, hash_to_g2  # RFC 9380 hashing
from .bls import (  # signature scheme
    Ciphersuite,
    SecretKey,
    from_secret_exponent,
    from_seed,
    get_public_key,
    key_gen,
    pop_prove,
    pop_verify,
    sign,
    verify,
)
from .errors import BLSError  # base for every untrusted-input rejection

__all__ = [  # public API
    "Fq",
    "Fr",
    "Fq2",
    "Fq12",
    "FqP",
    "G1",
    "G2",
    "Z1",
    "Z2",
    "add",
    "double",
    "eq",
    "is_on_curve",
    "mul",
    "neg",
    "pairing",
    "pairing_check",
    "expand_message_xmd",
    "hash_to_field_fq2",
    "hash_to_g2",
    "Ciphersuite",
    "SecretKey",
    "from_secret_exponent",
    "from_seed",
    "get_public_key",
    "key_gen",
    "pop_prove",
    "pop_verify",
    "sign",
    "verify",
    "BLSError",
]
