"""
storefront_security – credential and session core for the storefront backend.

Import path convention::

    from storefront_security.kernel.errors import AuthenticationError
    from storefront_security.security.encryption import FieldCipher
    from storefront_security.security.passwords import hash_password, verify_password
    from storefront_security.security.jwt import sign_token, verify_token
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
