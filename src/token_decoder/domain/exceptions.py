class TokenDecoderError(Exception):
    """Base class for every error raised by token_decoder."""
    pass


class CredentialUnavailable(TokenDecoderError):
    """Raised when a certificate file is missing, unreadable or unparsable."""
    pass


class VerificationError(TokenDecoderError):
    """Raised when a single verification attempt rejects the token."""
    pass


class SignatureInvalid(VerificationError):
    """Raised when the signature does not match the key or algorithm."""
    pass


class ClaimExpired(VerificationError):
    """Raised when `exp`, `nbf` or `iat` puts the token outside its validity window."""
    pass


class TokenMalformed(VerificationError):
    """Raised when the token cannot be parsed as a JWT."""
    pass


class TokenInvalid(TokenDecoderError):
    """Raised when no configured credential verifies the token."""
    pass
