"""Hashing byte strings onto G2 (RFC 9380, suite BLS12381G2_XMD:SHA-256_SSWU_RO_)."""

import hashlib

from .constants import (
    DST_NUL,
    FIELD_MODULUS,
    H_EFF_G2,
    HASH_TO_FIELD_L,
    ISO_3_A,
    ISO_3_B,
    ISO_3_MAP_COEFFS,
    ISO_3_Z,
    SSWU_ETAS,
    XMD_B_IN_BYTES,
    XMD_R_IN_BYTES,
)
from .curve import add, mul
from .fq2 import Fq2, sqrt_division

A, B, Z = Fq2(list(ISO_3_A)), Fq2(list(ISO_3_B)), Fq2(list(ISO_3_Z))  # E2' parameters and SSWU non-residue
ETAS = tuple(Fq2(list(e)) for e in SSWU_ETAS)
ISO_3_MAP = tuple(tuple(Fq2(list(k)) for k in ks) for ks in ISO_3_MAP_COEFFS)  # x_num, x_den, y_num, y_den

def _as_bytes(x):  # Messages and tags are raw bytes; text must be encoded by the caller.
    if isinstance(x, (bytes, bytearray, memoryview)):
        return bytes(x)
    raise TypeError(f"expected bytes, got {type(x).__name__}")

def _sha256(data):  # H
    return hashlib.sha256(data).digest()

def expand_message_xmd(msg, dst, len_in_bytes):  # RFC 9380 section 5.3.1 with SHA-256.
    msg, dst = _as_bytes(msg), _as_bytes(dst)
    if len(dst) > 255:
        raise ValueError("DST must be at most 255 bytes")
    ell = -(-len_in_bytes // XMD_B_IN_BYTES)
    if ell > 255 or len_in_bytes < 0:
        raise ValueError(f"cannot expand to {len_in_bytes} bytes")
    dst_prime = dst + bytes([len(dst)])
    z_pad = bytes(XMD_R_IN_BYTES)
    l_i_b_str = len_in_bytes.to_bytes(2, "big")
    b_0 = _sha256(z_pad + msg + l_i_b_str + b"\x00" + dst_prime)
    b = [_sha256(b_0 + b"\x01" + dst_prime)]
    for i in range(2, ell + 1):
        prev = bytes(x ^ y for x, y in zip(b_0, b[-1]))
        b.append(_sha256(prev + bytes([i]) + dst_prime))
    return b"".join(b)[:len_in_bytes]

def hash_to_field_fq2(msg, count, dst=DST_NUL):  # count Fq2 elements, each from two 64-byte windows.
    L = HASH_TO_FIELD_L
    uniform = expand_message_xmd(msg, dst, count * 2 * L)
    out = []
    for i in range(count):
        e = [int.from_bytes(uniform[L * (2 * i + j) : L * (2 * i + j + 1)], "big") % FIELD_MODULUS for j in range(2)]
        out.append(Fq2(e))
    return out

def sswu_map(t):  # Simplified SWU onto E2', returned as projective (X, Y, Z).
    t2 = t.square()
    zt2 = Z * t2
    temp = zt2 + zt2.square()
    den = -(A * temp)
    num = B * (temp + 1)
    if den.is_zero():  # exceptional case t^2 in {0, -1/Z}
        den = Z * A
    den_sq = den.square()
    v = den_sq * den
    u = num.square() * num + A * num * den_sq + B * v
    success, y = sqrt_division(u, v)
    if not success:
        # u/v is not square: move to x1 = Z t^2 x0, where g(x1) = Z^3 t^6 g(x0).
        sqrt_candidate = y * t2 * t
        u = zt2.square() * zt2 * u
        for eta in ETAS:
            candidate = eta * sqrt_candidate
            if (candidate.square() * v - u).is_zero():
                y = candidate
                break
        else:
            raise RuntimeError("Hash to Curve - Optimized SWU failure")
        num = num * zt2
    if t.sgn0() != y.sgn0():
        y = -y
    return (num, y * den, den)

def iso_map_g2(x, y, z):  # 3-isogeny E2' -> E2 on projective inputs, Horner in x with z-homogenization.
    z_powers = (z, z.square(), z.square() * z)
    mapped = []
    for k in ISO_3_MAP:
        acc = k[-1]
        for j, coeff in enumerate(reversed(k[:-1])):
            acc = acc * x + z_powers[j] * coeff
        mapped.append(acc)
    x_num, x_den, y_num, y_den = mapped
    y_num = y_num * y
    y_den = y_den * z
    return (x_num * y_den, x_den * y_num, x_den * y_den)

def clear_cofactor_g2(P):  # h_eff * P lands in the order-r subgroup.
    return mul(P, H_EFF_G2)

def map_to_curve_g2(u):  # iso_map_g2(sswu_map(u)); lands on E2 but not necessarily in G2.
    return iso_map_g2(*sswu_map(u))

def hash_to_g2(msg, dst=DST_NUL):  # Random-oracle hash: two field elements, two maps, one cofactor clear.
    u0, u1 = hash_to_field_fq2(msg, 2, dst)
    return clear_cofactor_g2(add(map_to_curve_g2(u0), map_to_curve_g2(u1)))
