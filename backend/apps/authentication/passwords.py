"""
Password hashing for myFlix accounts.

Plain functions over Django's configured password hashers, so callers pass
the user record and the candidate explicitly.
"""

from django.contrib.auth.hashers import check_password, make_password


def hash_password(raw_password: str) -> str:
    """Return a salted one-way hash of ``raw_password``."""
    return make_password(raw_password)


def verify_password(user, candidate: str) -> bool:
    """
    Check ``candidate`` against the hash stored on ``user``.

    The comparison is constant time. When the stored hash was produced by an
    outdated hasher it is upgraded in place.
    """

    def upgrade(raw_password):
        user.password = hash_password(raw_password)
        user.save(update_fields=["password"])

    return check_password(candidate, user.password, setter=upgrade)
