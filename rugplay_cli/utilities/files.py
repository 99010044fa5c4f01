"""
Local file helpers for multipart uploads (coin icons, avatars).
"""

from pathlib import Path

from ..core.exceptions import LocalFileError

UploadFile = tuple[str, bytes, str]


def load_image(path: str) -> UploadFile:
    """
    Read an image from disk as a ``(filename, content, content_type)`` tuple.

    The content type is derived from the extension (``icon.png`` ->
    ``image/png``), which is what the site's own upload form sends.

    Raises:
        LocalFileError: If the file cannot be read
    """
    file_path = Path(path).expanduser()
    try:
        content = file_path.read_bytes()
    except OSError as e:
        raise LocalFileError(f"Could not read {path}: {e}") from e

    extension = file_path.suffix.lstrip(".").lower()
    content_type = f"image/{extension}" if extension else "application/octet-stream"
    return file_path.name, content, content_type
