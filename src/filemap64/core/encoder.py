# src/filemap64/core/encoder.py
import base64
import json
import sys
import zlib
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, TextIO, Tuple

import pathspec

from filemap64 import config
from filemap64.core.collector import collect
from filemap64.exceptions import CompressionError, SerializationError
from filemap64.models import EncodeResult, ItemOutcome, SkipReason, SourceItem


def compress(data: bytes, level: int = config.COMPRESSION_LEVEL) -> bytes:
    """Returns a complete, finalized zlib stream for ``data``."""
    try:
        return zlib.compress(data, level)
    except zlib.error as e:
        raise CompressionError(str(e)) from e


def encode_text(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def build_file_map(items: Mapping[str, SourceItem], level: int = config.COMPRESSION_LEVEL) -> Tuple[Dict[str, str], List[ItemOutcome]]:
    """
    Compresses and encodes every collected item. Items that fail to compress
    are left out of the map and reported as skipped outcomes.
    """
    file_map: Dict[str, str] = {}
    outcomes: List[ItemOutcome] = []
    for identifier, item in items.items():
        try:
            compressed = compress(item.content, level)
        except CompressionError as e:
            outcomes.append(ItemOutcome.skipped(item.path, SkipReason.COMPRESSION_ERROR, str(e), identifier=identifier))
            continue
        file_map[identifier] = encode_text(compressed)
    return file_map, outcomes


def serialize_document(file_map: Mapping[str, str]) -> str:
    # Sorted keys keep the document deterministic
    try:
        return json.dumps(dict(file_map), sort_keys=True, separators=config.JSON_SEPARATORS)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"error marshaling JSON: {e}") from e


def encode_document(document: str) -> str:
    return encode_text(document.encode(config.DOCUMENT_ENCODING))


def encode_files(
    directory: Optional[Path],
    file_paths: Sequence[str] = (),
    ignore_spec: Optional[pathspec.PathSpec] = None,
    level: int = config.COMPRESSION_LEVEL,
) -> EncodeResult:
    """
    Full pipeline: collect -> compress -> base64 -> JSON -> base64.
    CollectionError and SerializationError propagate to the caller.
    """
    collection = collect(directory, file_paths, ignore_spec)
    file_map, compression_outcomes = build_file_map(collection.items, level)
    document = serialize_document(file_map)
    return EncodeResult(
        output=encode_document(document),
        file_map=file_map,
        document=document,
        outcomes=collection.outcomes + compression_outcomes,
    )


def report_outcomes(outcomes: Iterable[ItemOutcome], stream: Optional[TextIO] = None) -> int:
    """Prints one warning line per skipped entry. Returns the number printed."""
    stream = stream if stream is not None else sys.stderr
    count = 0
    for outcome in outcomes:
        # Collisions overwrite silently
        if not outcome.is_skipped or outcome.reason is SkipReason.OVERWRITTEN:
            continue
        detail = f": {outcome.detail}" if outcome.detail else ""
        print(f"  > [Warning] Skipping {outcome.path} ({outcome.reason.value}{detail})", file=stream)
        count += 1
    return count
