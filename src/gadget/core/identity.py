"""Identity utilities for redirect records.

Redirect ids are short public references: 10 characters sampled uniformly,
with replacement, from lowercase letters and digits. Uniqueness against
existing ids is not checked.
"""

import secrets
import string

REDIRECT_ID_ALPHABET = string.ascii_lowercase + string.digits
REDIRECT_ID_LENGTH = 10


def generate_redirect_id(length: int = REDIRECT_ID_LENGTH) -> str:
    """Generate a random redirect id.

    Args:
        length: Number of characters (default 10).

    Returns:
        Lowercase alphanumeric string of the requested length.
    """
    return "".join(secrets.choice(REDIRECT_ID_ALPHABET) for _ in range(length))
