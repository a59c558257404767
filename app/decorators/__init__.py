from app.decorators.with_retry import RETRIABLE_EXCEPTIONS, with_retry

__all__ = [
    "with_retry",
    "RETRIABLE_EXCEPTIONS",
]
