import os
import re
import time

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def generate_object_id() -> str:
    """24 hex chars: 4-byte big-endian epoch seconds + 8 random bytes."""
    timestamp = int(time.time()).to_bytes(4, "big")
    return (timestamp + os.urandom(8)).hex()


def is_object_id(value: str) -> bool:
    return bool(OBJECT_ID_PATTERN.match(value))
