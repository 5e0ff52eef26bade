from __future__ import annotations

from collections.abc import Mapping

from storefront_security.kernel.security import FieldEncryptor
from storefront_security.observability.logging import get_logger

__all__ = ["FieldKeyRotation"]

_log = get_logger(__name__)


class FieldKeyRotation:
    """Re-encrypts stored field tokens from one passphrase to another."""

    @staticmethod
    def re_encrypt(old: FieldEncryptor, new: FieldEncryptor, token: str) -> str:
        return new.encrypt(old.decrypt(token))

    @staticmethod
    def re_encrypt_fields(
        old: FieldEncryptor,
        new: FieldEncryptor,
        values: Mapping[str, str | None],
    ) -> dict[str, str | None]:
        """Rotate every non-empty value of one record.

        Empty values are left as-is. A value that fails to decrypt aborts the
        whole record so it is never half-rotated.
        """
        rotated = {
            k: (FieldKeyRotation.re_encrypt(old, new, v) if v else v)
            for k, v in values.items()
        }
        _log.info("fields_rotated", count=sum(1 for v in values.values() if v))
        return rotated
