from .constants import FINAL_EXP_HARD_PART, FQ12_MODULUS_COEFFS, FROBENIUS_TABLE
from .field import Fq

def _pad(xs, n):  # Right-pad coefficient list to size n.
    return list(xs) + [0] * (n - len(xs))

def _z(n):  # Allocate n zero Fq coefficients.
    return [Fq(0)] * n

def _trim(p):  # Remove trailing zeros from polynomial coefficients.
    p = list(p)
    while len(p) > 1 and p[-1] == 0:
        p.pop()
    return p

def _deg(p):  # Return polynomial degree under trailing-zero normalization.
    p = _trim(p)
    i = len(p) - 1
    while i > 0 and p[i] == 0:
        i -= 1
    return i

def _poly_div(a, b):  # Polynomial long division over Fq.
    a, b = _trim(a), _trim(b)
    q = _z(max(len(a) - len(b) + 1, 0))
    while len(a) >= len(b):
        c, k = a[-1] / b[-1], len(a) - len(b)
        q[k] = c
        for i in range(len(b)):
            a[k + i] = a[k + i] - c * b[i]
        a = _trim(a)
    return q

class FqP:  # Element of Fq[x]/(x^DEG + MOD[DEG-1] x^(DEG-1) + ... + MOD[0]).
    DEG, MOD = 0, ()
    _MOD_NZ = ()

    def __init_subclass__(cls):  # Cache the non-zero reduction terms.
        if "MOD" in cls.__dict__:
            if len(cls.MOD) != cls.DEG:
                raise ValueError("MOD must have DEG coefficients")
            cls._MOD_NZ = tuple((i, m) for i, m in enumerate(cls.MOD) if m)

    def __init__(self, coeffs):  # Normalize and store extension coefficients.
        cs = coeffs.c if hasattr(coeffs, "c") else coeffs
        self.c = tuple(x if isinstance(x, Fq) else Fq(x) for x in _pad(cs, type(self).DEG)[: type(self).DEG])

    one = classmethod(lambda cls: cls([1] + [0] * (cls.DEG - 1)))  # Multiplicative identity.

    zero = classmethod(lambda cls: cls([0] * cls.DEG))  # Additive identity.

    from_ints = classmethod(lambda cls, xs: cls(list(xs)))  # Build from plain integer coefficients.

    def to_ints(self): return [x.v for x in self.c]  # Canonical integer coefficients.

    def is_zero(self): return all(x.v == 0 for x in self.c)

    def is_one(self): return self.c[0].v == 1 and all(x.v == 0 for x in self.c[1:])

    def __add__(self, o):  # Coefficient-wise extension-field addition.
        return type(self)([a.v + b.v for a, b in zip(self.c, self._c(o).c)])

    def __sub__(self, o):  # Coefficient-wise extension-field subtraction.
        return type(self)([a.v - b.v for a, b in zip(self.c, self._c(o).c)])

    def __neg__(self):  # Additive inverse in extension field.
        return type(self)([-x.v for x in self.c])

    def __eq__(self, o):  # Equality over same extension type.
        return isinstance(o, type(self)) and self.c == o.c

    def __hash__(self): return hash((type(self).__name__, self.c))

    def _c(self, o):  # Coerce scalar/same-type into this extension type.
        if isinstance(o, type(self)):
            return o
        if isinstance(o, (int, Fq)):
            return type(self)([o] + [0] * (type(self).DEG - 1))
        raise TypeError(f"expected {type(self).__name__}, int or Fq")

    def __mul__(self, o):  # Multiply in quotient ring Fq[x]/(modulus).
        if isinstance(o, (int, Fq)):
            k = int(o)
            return type(self)([x.v * k for x in self.c])
        o = self._c(o)
        n = type(self).DEG
        a, b, t = [x.v for x in self.c], [x.v for x in o.c], [0] * (2 * n - 1)
        for i, ai in enumerate(a):
            if ai:
                for j, bj in enumerate(b):
                    t[i + j] += ai * bj
        for k in range(2 * n - 2, n - 1, -1):
            top = t[k]
            if top:
                for i, m in type(self)._MOD_NZ:
                    t[k - n + i] -= top * m
        return type(self)(t[:n])

    def __rmul__(self, o):  # Support scalar * extension-element.
        return self * o

    def square(self): return self * self

    def __pow__(self, e):  # Square-and-multiply exponentiation.
        if e < 0:
            return (self.inv()) ** (-e)
        out, t = type(self).one(), self
        while e:
            if e & 1:
                out = out * t
            e >>= 1
            if e:
                t = t * t
        return out

    def inv(self):  # Invert via extended Euclid on polynomials.
        n = type(self).DEG
        lm, hm = [Fq(1)] + _z(n), _z(n + 1)
        low, high = list(self.c) + [Fq(0)], [Fq(x) for x in type(self).MOD] + [Fq(1)]
        while _deg(low):
            r0 = _poly_div(high, low)
            r = r0 + _z(n + 1 - len(r0))
            nm, new = hm[:], high[:]
            for i in range(n + 1):
                for j in range(n + 1 - i):
                    nm[i + j], new[i + j] = nm[i + j] - lm[i] * r[j], new[i + j] - low[i] * r[j]
            lm, low, hm, high = nm, new, lm, low
        return type(self)(lm[:n]) * (Fq(1) / low[0])

    def __truediv__(self, o):  # Division as multiply by inverse.
        return self * self._c(o).inv()

    def __repr__(self):  # Compact debug string with canonical coefficients.
        return f"{type(self).__name__}({[int(x) for x in self.c]})"

class Fq12(FqP):  # Degree-12 extension field over Fq, for GT.
    DEG, MOD = 12, FQ12_MODULUS_COEFFS

    def scalar_mul(self, k):  # Multiply every coefficient by an Fq scalar.
        return self * k

    def frobenius(self):  # x -> x^q, via the precomputed images of the basis monomials.
        out = [0] * 12
        for a, row in zip(self.c, FROBENIUS_TABLE):
            a = a.frobenius().v
            if a:
                for pos, k in row.items():
                    out[pos] += a * k
        return Fq12(out)

def optimized_final_exponentiation(f):  # f^((q^12 - 1) / r) split into easy and hard parts.
    p2 = f.frobenius().frobenius() * f  # f^(q^2 + 1)
    t = p2
    for _ in range(6):
        t = t.frobenius()
    p3 = t / p2  # ^(q^6 - 1)
    return p3 ** FINAL_EXP_HARD_PART
