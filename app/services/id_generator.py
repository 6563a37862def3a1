import secrets
from typing import Callable


MEMO_ID_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz-"
MEMO_ID_LENGTH = 21

IdGenerator = Callable[[], str]


def generate_memo_id() -> str:
    """Generate a URL-safe 21-character identifier
    
    Each character is drawn uniformly from a 64-symbol alphabet using the
    OS CSPRNG. Collisions are treated as negligible, not prevented.
    """
    return "".join(secrets.choice(MEMO_ID_ALPHABET) for _ in range(MEMO_ID_LENGTH))
