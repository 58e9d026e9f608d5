from .constants import (
    CURVE_ORDER,
    FIELD_MODULUS,
    FQ_BYTES,
    G1_B,
    G1_GENERATOR,
    G2_B,
    G2_GENERATOR,
    POW_2_381,
    POW_2_382,
    POW_2_383,
    PUBLIC_KEY_SIZE,
    SIGNATURE_SIZE,
)
from .errors import InvalidPointError, NoSqrtError, PointAtInfinityError
from .field import Fq
from .fq2 import Fq2
from .fqp import Fq12

# Points are homogeneous projective triples (X, Y, Z) for the affine point
# (X/Z, Y/Z); the identity is (1, 1, 0). The same formulas serve G1 over Fq,
# G2 over Fq2 and the twisted copy of G2 over Fq12.

b, b2, b12 = Fq(G1_B), Fq2(list(G2_B)), Fq12([G1_B] + [0] * 11)  # curve params in Fq/Fq2/Fq12
G1 = (Fq(G1_GENERATOR[0]), Fq(G1_GENERATOR[1]), Fq.one())  # G1 generator
G2 = (Fq2(list(G2_GENERATOR[0])), Fq2(list(G2_GENERATOR[1])), Fq2.one())  # G2 generator
Z1 = (Fq.one(), Fq.one(), Fq.zero())  # G1 identity
Z2 = (Fq2.one(), Fq2.one(), Fq2.zero())  # G2 identity

G1_INFINITY = bytes([0xC0]) + bytes(PUBLIC_KEY_SIZE - 1)  # compressed G1 identity
G2_INFINITY = bytes([0xC0]) + bytes(SIGNATURE_SIZE - 1)  # compressed G2 identity

def _identity_like(P):  # Identity triple over the same field as P.
    cls = type(P[0])
    return (cls.one(), cls.one(), cls.zero())

def is_inf(P):  # Point at infinity iff Z = 0.
    return P[2].is_zero()

def is_on_curve(P, B):  # Check Y^2 Z - X^3 = B Z^3 (identity counts as on-curve).
    if is_inf(P):
        return True
    x, y, z = P
    return y * y * z - x * x * x == B * z * z * z

def eq(P1, P2):  # Projective equality by cross-multiplication.
    x1, y1, z1 = P1
    x2, y2, z2 = P2
    return x1 * z2 == x2 * z1 and y1 * z2 == y2 * z1

def neg(P):  # Negate elliptic-curve point.
    x, y, z = P
    return (x, -y, z)

def double(P):  # Projective doubling: W = 3X^2, S = YZ, B = XYS, H = W^2 - 8B.
    if is_inf(P):
        return P
    x, y, z = P
    W = x * x * 3
    S = y * z
    B = x * y * S
    H = W * W - B * 8
    S_squared = S * S
    newx = H * S * 2
    newy = W * (B * 4 - H) - y * y * S_squared * 8
    newz = S * S_squared * 8
    return (newx, newy, newz)

def add(P1, P2):  # Projective addition via U1 = Y2 Z1, U2 = Y1 Z2, V1 = X2 Z1, V2 = X1 Z2.
    if is_inf(P1):
        return P2
    if is_inf(P2):
        return P1
    x1, y1, z1 = P1
    x2, y2, z2 = P2
    U1, U2 = y2 * z1, y1 * z2
    V1, V2 = x2 * z1, x1 * z2
    if V1 == V2 and U1 == U2:
        return double(P1)
    if V1 == V2:
        return _identity_like(P1)
    U, V = U1 - U2, V1 - V2
    V_squared = V * V
    V_squared_times_V2 = V_squared * V2
    V_cubed = V * V_squared
    W = z1 * z2
    A = U * U * W - V_cubed - V_squared_times_V2 * 2
    newx = V * A
    newy = U * (V_squared_times_V2 - A) - V_cubed * U2
    newz = V_cubed * W
    return (newx, newy, newz)

def mul(P, n):  # Double-and-add scalar multiplication over the bits of n.
    if n < 0:
        return mul(neg(P), -n)
    if n == 0 or is_inf(P):
        return _identity_like(P)
    if n == 1:
        return P
    out, a = None, P
    while n:
        if n & 1:
            out = a if out is None else add(out, a)
        n >>= 1
        if n:
            a = double(a)
    return out

def is_in_subgroup(P):  # r * P = O.
    return is_inf(mul(P, CURVE_ORDER))

def to_affine(P):  # (X/Z, Y/Z); the identity has no affine form.
    if is_inf(P):
        raise PointAtInfinityError("point at infinity has no affine coordinates")
    x, y, z = P
    zinv = z.inv()
    return (x * zinv, y * zinv)

def from_affine(x, y):  # Lift affine coordinates with Z = 1.
    return (x, y, type(x).one())

def _sign_flag(y):  # 1 iff 2y >= q (on the imaginary part for Fq2 unless it is zero).
    if isinstance(y, Fq2):
        y = y.c[1] if y.c[1].v else y.c[0]
    return (y.v * 2) // FIELD_MODULUS

def compress_g1(P):  # 48-byte compressed encoding, flags in the top three bits.
    if is_inf(P):
        return G1_INFINITY
    x, y = to_affine(P)
    return (x.v + _sign_flag(y) * POW_2_381 + POW_2_383).to_bytes(PUBLIC_KEY_SIZE, "big")

def decompress_g1(data):  # Inverse of compress_g1; raises InvalidPointError on any malformed input.
    if len(data) != PUBLIC_KEY_SIZE:
        raise InvalidPointError(f"G1 point must be {PUBLIC_KEY_SIZE} bytes, got {len(data)}")
    z = int.from_bytes(data, "big")
    c_flag, b_flag, a_flag = (z >> 383) & 1, (z >> 382) & 1, (z >> 381) & 1
    if not c_flag:
        raise InvalidPointError("compression flag not set")
    if b_flag:
        if bytes(data) != G1_INFINITY:
            raise InvalidPointError("malformed point at infinity")
        return Z1
    x = z % POW_2_381
    if x >= FIELD_MODULUS:
        raise InvalidPointError("x coordinate not below the field modulus")
    x = Fq(x)
    try:
        y = (x * x * x + b).sqrt()
    except NoSqrtError as e:
        raise InvalidPointError("x coordinate is not on the curve") from e
    if _sign_flag(y) != a_flag:
        y = -y
    P = (x, y, Fq.one())
    if not is_on_curve(P, b):
        raise InvalidPointError("point not on curve")
    return P

def compress_g2(P):  # 96-byte encoding: flags and x.im in the first half, x.re in the second.
    if is_inf(P):
        return G2_INFINITY
    x, y = to_affine(P)
    z1 = x.c[1].v + _sign_flag(y) * POW_2_381 + POW_2_383
    return z1.to_bytes(FQ_BYTES, "big") + x.c[0].v.to_bytes(FQ_BYTES, "big")

def decompress_g2(data):  # Inverse of compress_g2; raises InvalidPointError on any malformed input.
    if len(data) != SIGNATURE_SIZE:
        raise InvalidPointError(f"G2 point must be {SIGNATURE_SIZE} bytes, got {len(data)}")
    z1, z2 = int.from_bytes(data[:FQ_BYTES], "big"), int.from_bytes(data[FQ_BYTES:], "big")
    c_flag, b_flag, a_flag = (z1 >> 383) & 1, (z1 >> 382) & 1, (z1 >> 381) & 1
    if not c_flag:
        raise InvalidPointError("compression flag not set")
    if b_flag:
        if bytes(data) != G2_INFINITY:
            raise InvalidPointError("malformed point at infinity")
        return Z2
    x1, x2 = z1 % POW_2_381, z2
    if x1 >= FIELD_MODULUS or x2 >= FIELD_MODULUS:
        raise InvalidPointError("x coordinate not below the field modulus")
    x = Fq2([x2, x1])
    try:
        y = (x * x * x + b2).sqrt()
    except NoSqrtError as e:
        raise InvalidPointError("x coordinate is not on the curve") from e
    if _sign_flag(y) != a_flag:
        y = -y
    P = (x, y, Fq2.one())
    if not is_on_curve(P, b2):
        raise InvalidPointError("point not on curve")
    return P
