# shop/utils/security.py
import bcrypt

from shop.utils.settings import SALT_ROUNDS

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72


class PasswordTooLongError(ValueError):
    def __init__(self):
        super().__init__(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


def hash_password(plain: str, rounds: int | None = None) -> str:
    encoded = plain.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise PasswordTooLongError()
    salt = bcrypt.gensalt(rounds=rounds or SALT_ROUNDS)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(plain: str, digest: str | None) -> bool:
    if not plain or not digest:
        return False
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), digest.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt digest, or the input is over-length
        return False
