import bcrypt

from config import ApplicationConfig

# Used when the email is unknown so login takes as long as a real check
_DUMMY_HASH = bcrypt.hashpw(
    b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    ).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def verify_dummy_password(password: str) -> None:
    try:
        bcrypt.checkpw(password.encode("utf-8"), _DUMMY_HASH)
    except ValueError:
        # Passwords over 72 bytes are rejected by newer bcrypt releases
        pass
