from .login import LoginSerializer

__all__ = [
    "LoginSerializer",
]
