import binascii  # hex codec
import hashlib  # SHA-256 for key-gen re-salting
import hmac  # HKDF-Extract / HKDF-Expand
import logging
from dataclasses import dataclass  # immutable key container
from enum import StrEnum  # typed ciphersuite identifiers

from .constants import (
    CURVE_ORDER,
    DST_AUG,
    DST_NUL,
    DST_POP,
    FQ_BYTES,
    KEYGEN_L,
    KEYGEN_MAX_ATTEMPTS,
    KEYGEN_SALT,
    POP_TAG,
    PUBLIC_KEY_SIZE,
    SECRET_KEY_SIZE,
    SIGNATURE_SIZE,
)
from .curve import (
    G1,
    G2_INFINITY,
    compress_g1,
    compress_g2,
    decompress_g1,
    decompress_g2,
    is_in_subgroup,
    is_inf,
    mul,
)
from .errors import (
    BLSError,
    InvalidHexError,
    InvalidIkmError,
    InvalidPointError,
    InvalidSecretError,
    InvalidSeedError,
    KeyGenerationFailedError,
)
from .field import Fr
from .hash_to_curve import hash_to_g2
from .pairing import pairing_check

logger = logging.getLogger(__name__)

_BYTES_LIKE = (bytes, bytearray, memoryview)


class Ciphersuite(StrEnum):  # BLS signature scheme variants over G2 signatures.
    Basic = "basic"
    MessageAugmentation = "message_augmentation"
    ProofOfPossession = "proof_of_possession"


_DST = {  # domain separation tag per ciphersuite
    Ciphersuite.Basic: DST_NUL,
    Ciphersuite.MessageAugmentation: DST_AUG,
    Ciphersuite.ProofOfPossession: DST_POP,
}


@dataclass(frozen=True, slots=True, repr=False)
class SecretKey:  # Non-zero scalar in Fr.
    secret: Fr

    def __post_init__(self):  # Zero is never a usable signing key.
        if not isinstance(self.secret, Fr) or self.secret.is_zero():
            raise InvalidSecretError("secret key must be a non-zero Fr element")

    def public_key(self):  # 48-byte compressed public key.
        return get_public_key(self)

    def __repr__(self): return "SecretKey(<redacted>)"


def from_seed(seed):  # Use 32 raw seed bytes as the scalar (no derivation).
    if not isinstance(seed, _BYTES_LIKE) or len(seed) != SECRET_KEY_SIZE:
        raise InvalidSeedError(f"seed must be {SECRET_KEY_SIZE} bytes")
    secret = Fr.from_bytes(bytes(seed))
    if secret.is_zero():
        raise InvalidSeedError("seed reduces to zero modulo the group order")
    return SecretKey(secret)


def _hkdf_mod_r(ikm, salt, key_info):  # HKDF-SHA256 to KEYGEN_L bytes, as an integer mod r.
    prk = hmac.new(salt, ikm + b"\x00", hashlib.sha256).digest()
    info = key_info + KEYGEN_L.to_bytes(2, "big")
    okm, t = b"", b""
    for i in range(1, -(-KEYGEN_L // hashlib.sha256().digest_size) + 1):
        t = hmac.new(prk, t + info + bytes([i]), hashlib.sha256).digest()
        okm += t
    return int.from_bytes(okm[:KEYGEN_L], "big") % CURVE_ORDER


def key_gen(ikm, key_info=b""):
    """Derive a secret key from at least 32 bytes of input key material.

    HKDF-SHA256 keyed with the "BLS-SIG-KEYGEN-SALT-" salt. A zero scalar is
    retried with salt SHA256(salt || i) for i = 1..255 before giving up.
    """
    if not isinstance(ikm, _BYTES_LIKE) or len(ikm) < 32:
        raise InvalidIkmError("ikm must be at least 32 bytes")
    ikm, key_info = bytes(ikm), bytes(key_info)
    salt = KEYGEN_SALT
    for attempt in range(KEYGEN_MAX_ATTEMPTS):
        if attempt:
            salt = hashlib.sha256(KEYGEN_SALT + bytes([attempt])).digest()
        secret = _hkdf_mod_r(ikm, salt, key_info)
        if secret:
            return SecretKey(Fr(secret))
        logger.debug(f"key_gen attempt {attempt} produced a zero scalar; re-salting")
    logger.warning(f"key_gen exhausted {KEYGEN_MAX_ATTEMPTS} attempts")
    raise KeyGenerationFailedError(f"no non-zero scalar after {KEYGEN_MAX_ATTEMPTS} attempts")


def from_secret_exponent(secret):  # Secret key from 32 bytes or a positive integer (reduced mod r).
    if isinstance(secret, _BYTES_LIKE):
        try:
            return from_seed(secret)
        except InvalidSeedError as e:
            raise InvalidSecretError(str(e)) from e
    if isinstance(secret, bool) or not isinstance(secret, int) or secret <= 0:
        raise InvalidSecretError("secret exponent must be bytes or a positive integer")
    fr = Fr(secret)
    if fr.is_zero():
        raise InvalidSecretError("secret exponent is a multiple of the group order")
    return SecretKey(fr)


def serialize_secret_key(sk):  # 32-byte big-endian scalar.
    return sk.secret.to_bytes()


def deserialize_secret_key(data):  # Inverse of serialize_secret_key.
    try:
        return from_seed(data)
    except InvalidSeedError as e:
        raise InvalidSecretError(str(e)) from e


def get_public_key(sk):  # sk * G1, compressed.
    return compress_g1(mul(G1, sk.secret.v))


def _as_message(message):  # Messages are raw bytes.
    if not isinstance(message, _BYTES_LIKE):
        raise TypeError(f"message must be bytes, got {type(message).__name__}")
    return bytes(message)


def sign(sk, message, ciphersuite=Ciphersuite.MessageAugmentation):  # Deterministic 96-byte signature.
    message, ciphersuite = _as_message(message), Ciphersuite(ciphersuite)
    if ciphersuite is Ciphersuite.MessageAugmentation:
        message = get_public_key(sk) + message
    return compress_g2(mul(hash_to_g2(message, _DST[ciphersuite]), sk.secret.v))


def _load_public_key(public_key):  # Decompress and check a public key; raises InvalidPointError.
    if not isinstance(public_key, _BYTES_LIKE) or len(public_key) != PUBLIC_KEY_SIZE:
        raise InvalidPointError(f"public key must be {PUBLIC_KEY_SIZE} bytes")
    flags = public_key[0]
    if not flags & 0x80:
        raise InvalidPointError("public key compression flag not set")
    if flags & 0x40:
        raise InvalidPointError("public key is the point at infinity")
    P = decompress_g1(bytes(public_key))
    if not is_in_subgroup(P):
        raise InvalidPointError("public key not in the prime-order subgroup")
    return P


def _load_signature(signature):  # Decompress and check a signature; the canonical identity is allowed.
    if not isinstance(signature, _BYTES_LIKE) or len(signature) != SIGNATURE_SIZE:
        raise InvalidPointError(f"signature must be {SIGNATURE_SIZE} bytes")
    signature = bytes(signature)
    flags = signature[0]
    if not flags & 0x80:
        raise InvalidPointError("signature compression flag not set")
    if signature[FQ_BYTES] & 0xE0:
        raise InvalidPointError("flag bits set in the second signature half")
    if flags & 0x40:
        if flags & 0x20 or signature != G2_INFINITY:
            raise InvalidPointError("non-canonical point at infinity")
        return decompress_g2(signature)
    P = decompress_g2(signature)
    if not is_in_subgroup(P):
        raise InvalidPointError("signature not in the prime-order subgroup")
    return P


def _core_verify(pk_point, message, sig_point, dst):  # e(G1, sig) == e(pk, H(m)).
    if is_inf(sig_point):
        logger.debug("verify rejected: signature is the point at infinity")
        return False
    ok = pairing_check(pk_point, hash_to_g2(message, dst), G1, sig_point)
    if not ok:
        logger.debug("verify rejected: pairing equation does not hold")
    return ok


def verify(signature, message, public_key, ciphersuite=Ciphersuite.MessageAugmentation):
    """Verify a compressed signature against a compressed public key.

    Never raises on malformed input: a non-bytes message, bad signature or
    key bytes and a failed pairing check are all reported as False.
    """
    ciphersuite = Ciphersuite(ciphersuite)
    try:
        message = _as_message(message)
    except TypeError as e:
        logger.debug(f"verify rejected: {e}")
        return False
    try:
        sig_point = _load_signature(signature)
        pk_point = _load_public_key(public_key)
    except BLSError as e:
        logger.debug(f"verify rejected: {e}")
        return False
    if ciphersuite is Ciphersuite.MessageAugmentation:
        message = bytes(public_key) + message
    return _core_verify(pk_point, message, sig_point, _DST[ciphersuite])


def pop_prove(sk):  # Sign the own public key under the proof-of-possession tag.
    public_key = get_public_key(sk)
    return compress_g2(mul(hash_to_g2(public_key, POP_TAG), sk.secret.v))


def pop_verify(public_key, proof):  # Check a proof of possession for public_key.
    try:
        proof_point = _load_signature(proof)
        pk_point = _load_public_key(public_key)
    except BLSError as e:
        logger.debug(f"pop_verify rejected: {e}")
        return False
    return _core_verify(pk_point, bytes(public_key), proof_point, POP_TAG)


def validate_public_key(public_key):  # Well-formed, non-identity, in-subgroup G1 point.
    try:
        _load_public_key(public_key)
    except BLSError as e:
        logger.debug(f"public key rejected: {e}")
        return False
    return True


def validate_signature(signature):  # Well-formed G2 point; the canonical identity encoding passes.
    try:
        _load_signature(signature)
    except BLSError as e:
        logger.debug(f"signature rejected: {e}")
        return False
    return True


def sizes():  # Byte sizes of the wire artifacts.
    return {"secret_key": SECRET_KEY_SIZE, "public_key": PUBLIC_KEY_SIZE, "signature": SIGNATURE_SIZE}


def ciphersuites():  # Domain separation tags keyed by ciphersuite, plus the PoP tag.
    return {
        Ciphersuite.Basic.value: DST_NUL,
        Ciphersuite.MessageAugmentation.value: DST_AUG,
        Ciphersuite.ProofOfPossession.value: DST_POP,
        "pop_tag": POP_TAG,
    }


def to_hex(data): return bytes(data).hex()  # Lowercase hex.


def from_hex(text):  # Decode hex of either case.
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, TypeError, ValueError) as e:
        raise InvalidHexError(f"invalid hex: {text!r}") from e
