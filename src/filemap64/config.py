# src/filemap64/config.py
import zlib

# zlib stream: 2-byte header, deflate payload, Adler-32 trailer
COMPRESSION_LEVEL = zlib.Z_DEFAULT_COMPRESSION

# rw-r--r--
OUTPUT_FILE_MODE = 0o644

DOCUMENT_ENCODING = "utf-8"
JSON_SEPARATORS = (",", ":")

USAGE_ERROR = "At least one of -d/--directory or file paths must be provided"
WRITE_CONFIRMATION = "Compressed and encoded data written to {path}"
