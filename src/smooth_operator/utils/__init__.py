from .casing import keys_to_camel_case
from .retry import poll_until

__all__ = ["keys_to_camel_case", "poll_until"]
