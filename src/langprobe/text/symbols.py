"""
Symbol tables used by character normalization.

The tables come from the ``messages.properties`` resource published with the
langdetect distribution:

    - NGram.KANJI_*: CJK ideograph equivalence classes; the first member of
      each class is its representative
    - NGram.LATIN1_EXCLUDE: Latin-1 characters treated as separators
    - TO_NORMALIZE_VI_CHARS, DMARK_CLASS, NORMALIZED_VI_CHARS_03xx: the
      Vietnamese base letters, combining marks and precomposed results

They are built once per process, on first use, and never mutated afterwards,
so concurrent readers need no synchronization.
"""

import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from langdetect.utils.messages import Messages

from langprobe.core.logging.logger import get_logger

logger = get_logger(__name__)

KANJI_CLASS_PREFIX = "NGram.KANJI_"
DMARK_KEYS = (
    "NORMALIZED_VI_CHARS_0300",
    "NORMALIZED_VI_CHARS_0301",
    "NORMALIZED_VI_CHARS_0303",
    "NORMALIZED_VI_CHARS_0309",
    "NORMALIZED_VI_CHARS_0323",
)


@dataclass(frozen=True)
class SymbolTables:
    """Read-only normalization tables."""

    cjk_map: Mapping[str, str]
    latin1_excluded: str
    vi_base_letters: str
    vi_diacritic_marks: str
    vi_composed: Tuple[str, ...]


_tables: Optional[SymbolTables] = None
_tables_lock = threading.Lock()


def _build_tables() -> SymbolTables:
    messages = Messages().messages

    cjk_map = {}
    n_classes = 0
    for key, symbols in messages.items():
        if not key.startswith(KANJI_CLASS_PREFIX) or not symbols:
            continue
        representative = symbols[0]
        for ch in symbols:
            cjk_map[ch] = representative
        n_classes += 1

    tables = SymbolTables(
        cjk_map=MappingProxyType(cjk_map),
        latin1_excluded=messages["NGram.LATIN1_EXCLUDE"],
        vi_base_letters=messages["TO_NORMALIZE_VI_CHARS"],
        vi_diacritic_marks=messages["DMARK_CLASS"],
        vi_composed=tuple(messages[key] for key in DMARK_KEYS),
    )
    logger.debug(
        "Symbol tables initialized",
        cjk_classes=n_classes,
        cjk_symbols=len(cjk_map),
    )
    return tables


def get_symbol_tables() -> SymbolTables:
    """Return the process-wide symbol tables, building them on first call."""
    global _tables
    if _tables is None:
        with _tables_lock:
            if _tables is None:
                _tables = _build_tables()
    return _tables
