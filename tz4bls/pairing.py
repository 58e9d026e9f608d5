import logging

from .constants import ATE_LOOP_BITS, PSEUDO_BINARY_ENCODING
from .curve import add, b, b2, double, is_inf, is_on_curve
from .fqp import Fq12, optimized_final_exponentiation

logger = logging.getLogger(__name__)

GT = Fq12  # target group field

def twist(P):  # Map a projective G2 point over Fq2 into Fq12 via w^2, w^3 placement.
    (x0, x1), (y0, y1), (z0, z1) = (c.c for c in P)
    nx = [0] * 12
    ny = [0] * 12
    nz = [0] * 12
    nx[1], nx[7] = x0.v - x1.v, x1.v
    ny[0], ny[6] = y0.v - y1.v, y1.v
    nz[3], nz[9] = z0.v - z1.v, z1.v
    return (Fq12(nx), Fq12(ny), Fq12(nz))

def cast_g1_to_fq12(P):  # Embed G1 point coordinates as constant Fq12 polynomials.
    return tuple(Fq12([c]) for c in P)

def linefunc(P1, P2, T):  # Line through P1, P2 evaluated at T, as (numerator, denominator).
    x1, y1, z1 = P1
    x2, y2, z2 = P2
    xt, yt, zt = T
    m_num = y2 * z1 - y1 * z2
    m_den = x2 * z1 - x1 * z2
    if m_den.is_zero():
        if not m_num.is_zero():  # vertical
            return xt * z1 - x1 * zt, z1 * zt
        m_num, m_den = x1 * x1 * 3, y1 * z1 * 2  # tangent
    return m_num * (xt * z1 - x1 * zt) - m_den * (yt * z1 - y1 * zt), m_den * zt * z1

def miller_loop(Q, P):  # Optimal-ate Miller loop for Q in G2, P in G1 (both projective).
    if is_inf(Q) or is_inf(P):
        return Fq12.one()
    cast_P, twist_Q = cast_g1_to_fq12(P), twist(Q)
    R, f_num, f_den = Q, Fq12.one(), Fq12.one()
    for bit in reversed(PSEUDO_BINARY_ENCODING[:ATE_LOOP_BITS]):
        twist_R = twist(R)
        _n, _d = linefunc(twist_R, twist_R, cast_P)
        f_num, f_den = f_num * f_num * _n, f_den * f_den * _d
        R = double(R)
        if bit:
            _n, _d = linefunc(twist(R), twist_Q, cast_P)
            f_num, f_den = f_num * _n, f_den * _d
            R = add(R, Q)
    return f_num / f_den

def final_exponentiation(f):  # Raise a Miller-loop output to (q^12 - 1) / r.
    return optimized_final_exponentiation(f)

def pairing(P, Q, final_exponentiate=True):  # e(P, Q) for P in G1, Q in G2.
    if is_inf(P) or is_inf(Q):
        return Fq12.one()
    if not is_on_curve(P, b):
        raise ValueError("P not on G1")
    if not is_on_curve(Q, b2):
        raise ValueError("Q not on G2")
    f = miller_loop(Q, P)
    return final_exponentiation(f) if final_exponentiate else f

def pairing_check(pubkey, h_msg, g1_generator, signature):
    """Check e(g1_generator, signature) == e(pubkey, h_msg).

    Both Miller loops share one final exponentiation of
    e(gen, sig) * e(pk, H(m))^-1. Any identity or off-curve input fails the
    check instead of raising.
    """
    for name, P, B in (("pubkey", pubkey, b), ("message hash", h_msg, b2), ("generator", g1_generator, b), ("signature", signature, b2)):
        if is_inf(P):
            logger.debug(f"pairing check rejected: {name} is the point at infinity")
            return False
        if not is_on_curve(P, B):
            logger.debug(f"pairing check rejected: {name} not on curve")
            return False
    e1 = miller_loop(signature, g1_generator)
    e2 = miller_loop(h_msg, pubkey)
    return final_exponentiation(e1 * e2.inv()).is_one()

def gt_identity(): return Fq12.one()  # 1 in GT.

def is_identity(x): return x.is_one()

def gt_mul(x, y): return x * y

def gt_inv(x): return x.inv()

def gt_eq(x, y): return x == y
