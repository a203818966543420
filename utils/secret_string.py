"""
Secret Handling for API Credentials
Keeps access tokens out of reprs, logs, pickles and copies
"""

import hmac


REDACTED = '**********'

# Lone surrogates (e.g. from surrogateescape-decoded environ) must round-trip
ENCODING_ERRORS = 'surrogatepass'


class SecretString:
    """
    Opaque holder for a single secret string

    The plaintext lives in a private bytearray that is zeroed when the
    object is dropped. ``expose_secret()`` is the only way to read it.
    """

    __slots__ = ('_buffer', '_scrubbed')

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise TypeError(f"SecretString expects str, got {type(value).__name__}")
        self._buffer = bytearray(value.encode('utf-8', ENCODING_ERRORS))
        self._scrubbed = False

    def expose_secret(self) -> str:
        """Return the plaintext. Keep the result out of logs."""
        if self._scrubbed:
            raise ValueError("Secret has been zeroized")
        return self._buffer.decode('utf-8', ENCODING_ERRORS)

    def zeroize(self):
        """Overwrite the backing buffer with zeros"""
        buffer = getattr(self, '_buffer', None)
        if buffer is None:
            return
        for i in range(len(buffer)):
            buffer[i] = 0
        self._scrubbed = True

    @property
    def is_zeroized(self) -> bool:
        return self._scrubbed

    def __del__(self):
        self.zeroize()

    def __repr__(self):
        return f"SecretString('{REDACTED}')"

    __str__ = __repr__

    def __format__(self, format_spec):
        return format(repr(self), format_spec)

    def __eq__(self, other):
        if not isinstance(other, SecretString):
            return NotImplemented
        if self._scrubbed or other._scrubbed:
            return False
        return hmac.compare_digest(self._buffer, other._buffer)

    __hash__ = None

    def __len__(self):
        return len(self._buffer)

    def __bool__(self):
        return len(self._buffer) > 0 and not self._scrubbed

    # Copies share the one buffer
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        raise TypeError("SecretString cannot be pickled")


def wrap(token: str) -> SecretString:
    """Wrap a plaintext token"""
    return SecretString(token)


def reveal(handle: SecretString) -> str:
    """Return the plaintext of a wrapped token"""
    return handle.expose_secret()
