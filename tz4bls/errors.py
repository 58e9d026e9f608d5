class BLSError(ValueError):  # Untrusted input rejected; verification collapses these to False.
    pass

class InvalidSeedError(BLSError):  # Seed is not 32 bytes or reduces to zero.
    pass

class InvalidIkmError(BLSError):  # Key material shorter than 32 bytes.
    pass

class InvalidSecretError(BLSError):  # Secret exponent unusable as a signing key.
    pass

class KeyGenerationFailedError(BLSError):  # Every HKDF attempt produced a zero scalar.
    pass

class InvalidPointError(BLSError):  # Bytes do not encode a valid compressed point.
    pass

class NoSqrtError(BLSError):  # Element is not a quadratic residue.
    pass

class PointAtInfinityError(BLSError):  # Identity has no affine form.
    pass

class InvalidHexError(BLSError):  # Hex string could not be decoded.
    pass

class InvalidLengthError(BLSError):  # Byte string has the wrong width for a field element.
    pass
