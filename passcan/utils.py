"""
Utility functions for Passcan
"""
import os

from passcan.config import BINARY_SNIFF_BYTES


def is_binary_file(file_path: str, chunk_size: int = BINARY_SNIFF_BYTES) -> bool:
    """Null byte in the first chunk means binary; unreadable files count as text"""
    try:
        with open(file_path, 'rb') as f:
            chunk = f.read(chunk_size)
    except OSError:
        return False
    return b'\0' in chunk


def has_suffix(name: str, suffixes) -> bool:
    """Plain string suffix match, so '.min.js' and '.env' both work"""
    return any(name.endswith(suffix) for suffix in suffixes)


def format_duration(seconds: float) -> str:
    """Format elapsed time for the summary line"""
    if seconds < 1:
        return f"{seconds * 1000:.2f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, seconds = divmod(seconds, 60)
    return f"{int(minutes)}m {seconds:.2f}s"


def sanitize_path(path: str) -> str:
    """Sanitize path for display (hide the home directory in reports)"""
    home_path = os.path.expanduser("~")
    if path.startswith(home_path):
        return "~" + path[len(home_path):]
    return path
