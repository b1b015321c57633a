import re
import secrets

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9.\-]")

# S3 rejects object keys longer than 1024 bytes (UTF-8)
MAX_KEY_BYTES = 1024


def sanitize_filename(filename: str) -> str:
    """Strip everything outside [A-Za-z0-9.-] so the name cannot add path segments."""
    return _UNSAFE_KEY_CHARS.sub("", filename) or "file"


def build_storage_key(prefix: str, filename: str, now_ms: int) -> str:
    """
    Object key for an uploaded asset: <prefix>/<millis>-<random>-<sanitized name>.

    The timestamp and random part keep keys unique, so a key is never reused
    by two grants. Overlong names are cut from the front so the extension
    survives and the key fits in MAX_KEY_BYTES.
    """
    prefix = prefix.strip("/")
    head = f"{now_ms}-{secrets.token_hex(4)}-"
    if prefix:
        head = f"{prefix}/{head}"

    budget = MAX_KEY_BYTES - len(head.encode("utf-8"))
    if budget <= 0:
        raise ValueError("key prefix leaves no room for the file name")
    # sanitized names are ASCII, so characters and bytes coincide
    name = sanitize_filename(filename)[-budget:]
    return f"{head}{name}"
