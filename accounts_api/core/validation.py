# File: accounts_api/core/validation.py

"""
Syntax checks for signup and login credentials.

These are the only copies of the email and password patterns; callers
must go through these functions.
"""

import re

# local@domain.tld, no whitespace and no extra "@" in any part
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# 8+ chars from [A-Za-z0-9$@!%*#?&], with a letter, a digit and a special
PASSWORD_PATTERN = re.compile(
    r"(?=.*[A-Za-z])(?=.*\d)(?=.*[$@!%*#?&])[A-Za-z\d$@!%*#?&]{8,}",
    re.ASCII,
)


def is_email_valid(email) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_password_valid(password) -> bool:
    if not isinstance(password, str):
        return False
    return PASSWORD_PATTERN.fullmatch(password) is not None
