import base64
import binascii
import hashlib
import secrets

HASH_ITERATIONS = 600_000


class TrainerAuth:
    @staticmethod
    def hash_password(password: str) -> str:
        salt = secrets.token_bytes(32)
        dk = hashlib.pbkdf2_hmac("sha256", password.encode(), salt, iterations=HASH_ITERATIONS)
        return base64.b64encode(salt).decode() + "$" + base64.b64encode(dk).decode()

    @staticmethod
    def verify_password(plain: str, hashed: str) -> bool:
        if "$" not in hashed:
            return False
        salt_b64, dk_b64 = hashed.split("$", 1)
        try:
            salt = base64.b64decode(salt_b64, validate=True)
            dk = base64.b64decode(dk_b64, validate=True)
        except (binascii.Error, ValueError):
            return False
        check = hashlib.pbkdf2_hmac("sha256", plain.encode(), salt, iterations=HASH_ITERATIONS)
        return secrets.compare_digest(dk, check)
