from .constants import (
    EVEN_EIGHTH_ROOTS,
    FQ2_ORDER,
    P_MINUS_9_DIV_16,
    POSITIVE_EIGHTH_ROOTS,
    SQRT_DIVISORS,
)
from .errors import NoSqrtError
from .field import Fq
from .fqp import FqP

class Fq2(FqP):  # Quadratic extension Fq[u]/(u^2 + 1), coefficients (re, im).
    DEG, MOD = 2, (1, 0)

    @classmethod
    def from_ints(cls, a, b=0):  # Build a + b*u from plain integers.
        return cls([a, b])

    def __mul__(self, o):  # (a + bu)(c + du) = (ac - bd) + (ad + bc)u.
        if isinstance(o, (int, Fq)):
            k = int(o)
            return Fq2([self.c[0].v * k, self.c[1].v * k])
        o = self._c(o)
        a, b = self.c[0].v, self.c[1].v
        c, d = o.c[0].v, o.c[1].v
        return Fq2([a * c - b * d, a * d + b * c])

    def square(self):  # (a + bu)^2 = (a + b)(a - b) + 2ab u.
        a, b = self.c[0].v, self.c[1].v
        return Fq2([(a + b) * (a - b), 2 * a * b])

    def mul_scalar(self, k):  # Multiply both coefficients by an integer.
        return self * int(k)

    def conjugate(self): return Fq2([self.c[0], -self.c[1]])

    def norm(self): return Fq(self.c[0].v * self.c[0].v + self.c[1].v * self.c[1].v)  # a^2 + b^2 in Fq.

    def inv(self):  # conj(x) / norm(x), one base-field inversion.
        return self.conjugate() * self.norm().inv()

    def sgn0(self):  # Sign per the hash-to-curve convention for m = 2.
        a, b = self.c[0].v, self.c[1].v
        return (a & 1) | (a == 0 and b & 1)

    def sqrt(self):
        """Square root with a canonical choice of sign.

        Uses the eighth-roots-of-unity method: x^((q^2 + 7) / 16) squared over x
        must be an even power of a primitive eighth root zeta, zeta^(2k), and
        dividing by zeta^k leaves a true root. Of the two roots the one with the
        larger imaginary part (then larger real part) is returned.
        """
        if self.is_zero() or self.is_one():
            return self
        candidate = self ** ((FQ2_ORDER + 8) // 16)
        check = candidate.square() / self
        for k, root in enumerate(EVEN_EIGHTH_ROOTS):
            if check == Fq2(root):
                x1 = candidate / Fq2(SQRT_DIVISORS[k])
                x2 = -x1
                if (x1.c[1].v, x1.c[0].v) > (x2.c[1].v, x2.c[0].v):
                    return x1
                return x2
        raise NoSqrtError(f"{self!r} is not a quadratic residue")

    @property
    def re(self): return self.c[0]

    @property
    def im(self): return self.c[1]

def sqrt_division(u, v):  # (True, sqrt(u/v)) when u/v is square, else (False, gamma).
    temp1 = u * v ** 7
    temp2 = temp1 * v ** 8
    gamma = temp2 ** P_MINUS_9_DIV_16 * temp1  # u v^7 (u v^15)^((q^2 - 9) / 16)
    for root in POSITIVE_EIGHTH_ROOTS:
        candidate = Fq2(root) * gamma
        if (candidate.square() * v - u).is_zero():
            return True, candidate
    return False, gamma
