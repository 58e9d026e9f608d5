import secrets

from .constants import CURVE_ORDER, FIELD_MODULUS, FQ_BYTES, FR_BYTES
from .errors import InvalidLengthError, NoSqrtError


class PrimeField:  # Prime field element stored as its canonical residue.
    MODULUS = 0
    BYTES = 0

    def __init_subclass__(cls):  # Validate modulus and derive encoding width for each subclass.
        if "MODULUS" not in cls.__dict__:
            return
        p = cls.MODULUS
        if p % 2 == 0 or p < 3:
            raise ValueError("MODULUS must be odd and at least 3")
        if "BYTES" not in cls.__dict__:
            cls.BYTES = (p.bit_length() + 7) // 8

    def __init__(self, x=0):  # Build element from any int (reduced into [0, MODULUS)).
        self.v = x % type(self).MODULUS

    zero = classmethod(lambda cls: cls(0))  # Additive identity.

    one = classmethod(lambda cls: cls(1))  # Multiplicative identity.

    random = classmethod(lambda cls: cls(secrets.randbelow(cls.MODULUS)))  # Uniform element from the OS CSPRNG.

    @classmethod
    def from_bytes(cls, data):  # Big-endian decode of exactly BYTES bytes, reduced mod MODULUS.
        if len(data) != cls.BYTES:
            raise InvalidLengthError(f"{cls.__name__} expects {cls.BYTES} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    def to_bytes(self): return self.v.to_bytes(type(self).BYTES, "big")  # Canonical big-endian encoding.

    def to_int(self): return self.v  # Canonical integer form.

    def is_zero(self): return self.v == 0  # True for the additive identity.

    def is_one(self): return self.v == 1  # True for the multiplicative identity.

    def inv(self):  # Multiplicative inverse in the same field.
        if self.v == 0: raise ZeroDivisionError("cannot invert zero")
        return type(self)(pow(self.v, -1, type(self).MODULUS))

    def square(self): return type(self)(self.v * self.v)  # self * self.

    def _c(self, other):  # Coerce int/same-type operand into field element.
        cls = type(self)
        if isinstance(other, cls):
            return other
        if isinstance(other, int):
            return cls(other)
        raise TypeError(f"expected {cls.__name__} or int")

    def __add__(self, other):  # Field addition modulo MODULUS.
        return type(self)(self.v + self._c(other).v)

    def __radd__(self, other):
        return self + other

    def __sub__(self, other):  # Field subtraction modulo MODULUS.
        return type(self)(self.v - self._c(other).v)

    def __rsub__(self, other):
        return self._c(other) - self

    def __mul__(self, other):  # Field multiplication modulo MODULUS.
        if isinstance(other, int):
            return type(self)(self.v * other)
        if isinstance(other, type(self)):
            return type(self)(self.v * other.v)
        return NotImplemented

    def __rmul__(self, other):
        return self * other

    def __pow__(self, e):  # Exponentiation with modular power semantics.
        return (self.inv()) ** (-e) if e < 0 else type(self)(pow(self.v, e, type(self).MODULUS))

    def __truediv__(self, other):  # Division as multiply by inverse.
        return self * self._c(other).inv()

    def __neg__(self):  # Additive inverse modulo MODULUS.
        return type(self)(-self.v)

    def __eq__(self, other):  # Equality with field elements or canonical ints.
        if isinstance(other, type(self)):
            return self.v == other.v
        return self.v == (other % type(self).MODULUS) if isinstance(other, int) else False

    def __hash__(self): return hash((type(self).MODULUS, self.v))

    def __int__(self): return self.v  # int(...) exposes canonical integer.

    def __bool__(self): return self.v != 0

    def __repr__(self): return f"{type(self).__name__}({self.v})"  # Debug-friendly printable form.

class Fq(PrimeField):  # BLS12-381 base field.
    MODULUS = FIELD_MODULUS
    BYTES = FQ_BYTES

    def sqrt(self):  # Square root via a^((q+1)/4), valid because q = 3 mod 4.
        if self.v == 0:
            return self
        candidate = self ** ((FIELD_MODULUS + 1) // 4)
        if candidate.square() != self:
            raise NoSqrtError(f"{self!r} is not a quadratic residue")
        return candidate

    def frobenius(self): return self  # a^q = a on the prime field.

class Fr(PrimeField):  # BLS12-381 scalar field.
    MODULUS = CURVE_ORDER
    BYTES = FR_BYTES
