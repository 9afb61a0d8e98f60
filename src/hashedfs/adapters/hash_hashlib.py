"""hashlib-based hash adapters."""

import hashlib

from ..core.errors import ConfigError


class HashlibAdapter:
    """Digest tokens from any fixed-length hashlib algorithm."""

    def __init__(self, algorithm: str = "sha256"):
        try:
            probe = hashlib.new(algorithm)
        except ValueError as e:
            raise ConfigError(f"Unsupported hash algorithm: {algorithm}") from e
        if probe.digest_size == 0:
            # shake_* need an explicit length
            raise ConfigError(f"Variable-length hash algorithm not supported: {algorithm}")
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def hexdigest(self, data: bytes) -> str:
        return hashlib.new(self._algorithm, data).hexdigest()


class Sha256Adapter(HashlibAdapter):
    """SHA256 digest tokens."""

    def __init__(self) -> None:
        super().__init__("sha256")

    def hexdigest(self, data: bytes) -> str:
        return hashlib.sha256(data).hexdigest()
