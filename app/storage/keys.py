import re
import time
import uuid

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")
_MAX_NAME_LENGTH = 128


def build_blob_key(original_name: str) -> str:
    """Build a time-ordered, collision-resistant key: {epoch_ms}-{rand}-{name}."""
    millis = int(time.time() * 1000)
    suffix = uuid.uuid4().hex[:8]
    return f"{millis}-{suffix}-{_sanitize_name(original_name)}"


def _sanitize_name(name: str) -> str:
    base = name.replace("\\", "/").rsplit("/", 1)[-1]
    cleaned = _UNSAFE_CHARS.sub("_", base).strip("._")
    return cleaned[:_MAX_NAME_LENGTH] or "file"
