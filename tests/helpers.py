# Smallest valid-looking image bodies; only the declared MIME type is checked
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
GIF_BYTES = b"GIF89a" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


def png(name: str = "avatar.png"):
    return (name, PNG_BYTES, "image/png")
