# feedback_service/core/security.py
from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str, method: str) -> str:
    return generate_password_hash(password, method=method)


def verify_password(password_hash: str, password: str) -> bool:
    # the method and salt are read back from the stored hash
    return check_password_hash(password_hash, password)
