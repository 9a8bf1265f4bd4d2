"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Default administrator creation on first startup
- credentials: Password hashing and verification (HMAC-SHA512 + salt)
- db: Database configuration and connection management
- errors: Error kinds raised by the credential/token core
- passwords: Random password generation under a complexity policy
- security: JWT bearer token issuance and decoding
"""
