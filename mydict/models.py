"""
Word record types returned by the dictionary API.

The API answers with one of two JSON shapes depending on the language of the
headword. Payloads are parsed once into an explicit record variant so the
renderer can dispatch on type instead of probing raw JSON.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Union


# Matches a run of Latin letters or spaces anywhere in the headword
LATIN_RUN_PATTERN = re.compile(r'[ A-Za-z]+')


class WordKind(Enum):
    ENGLISH = "english"
    CHINESE = "chinese"


@dataclass(frozen=True)
class Exchange:
    """Inflected forms of an English word, each a list of spellings."""
    word_pl: List[str] = field(default_factory=list)
    word_past: List[str] = field(default_factory=list)
    word_done: List[str] = field(default_factory=list)
    word_ing: List[str] = field(default_factory=list)
    word_third: List[str] = field(default_factory=list)
    word_er: List[str] = field(default_factory=list)
    word_est: List[str] = field(default_factory=list)

    def tense_forms(self) -> List[List[str]]:
        """Third person, past, past participle and present participle, in that order."""
        return [self.word_third, self.word_past, self.word_done, self.word_ing]

    def has_tense_forms(self) -> bool:
        return any(self.tense_forms())


@dataclass(frozen=True)
class EnglishPart:
    part: str
    means: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class EnglishSymbol:
    ph_en: str = ""
    ph_am: str = ""
    ph_other: str = ""
    ph_en_mp3: str = ""
    ph_am_mp3: str = ""
    ph_tts_mp3: str = ""
    parts: List[EnglishPart] = field(default_factory=list)


@dataclass(frozen=True)
class EnglishWordRecord:
    word_name: str
    is_common_word: int = 0
    exchange: Optional[Exchange] = None
    symbols: List[EnglishSymbol] = field(default_factory=list)
    items: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChineseMeaning:
    word_mean: str
    has_mean: str = ""
    split: int = 0


@dataclass(frozen=True)
class ChinesePart:
    part_name: str
    means: List[ChineseMeaning] = field(default_factory=list)


@dataclass(frozen=True)
class ChineseSymbol:
    word_symbol: str = ""
    symbol_mp3: str = ""
    parts: List[ChinesePart] = field(default_factory=list)


@dataclass(frozen=True)
class ChineseWordRecord:
    word_name: str
    symbols: List[ChineseSymbol] = field(default_factory=list)


WordRecord = Union[EnglishWordRecord, ChineseWordRecord]


def classify_headword(word_name: str) -> WordKind:
    """Classify a headword as English-like or Chinese-like.

    This is a search, not a full match: any Latin letter or space anywhere in
    the headword makes it English-like, so "测a试" is English-like.
    """
    if LATIN_RUN_PATTERN.search(word_name):
        return WordKind.ENGLISH
    return WordKind.CHINESE


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _mapping_list(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _string_list(value: Any) -> List[str]:
    """Normalise a spelling or gloss field to a list of strings."""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return [_text(item) for item in value if item is not None]
    return [_text(value)]


def _parse_exchange(data: Any) -> Optional[Exchange]:
    if not isinstance(data, Mapping):
        return None
    return Exchange(
        word_pl=_string_list(data.get('word_pl')),
        word_past=_string_list(data.get('word_past')),
        word_done=_string_list(data.get('word_done')),
        word_ing=_string_list(data.get('word_ing')),
        word_third=_string_list(data.get('word_third')),
        word_er=_string_list(data.get('word_er')),
        word_est=_string_list(data.get('word_est')),
    )


def _parse_english(data: Mapping[str, Any]) -> EnglishWordRecord:
    symbols = [
        EnglishSymbol(
            ph_en=_text(symbol.get('ph_en')),
            ph_am=_text(symbol.get('ph_am')),
            ph_other=_text(symbol.get('ph_other')),
            ph_en_mp3=_text(symbol.get('ph_en_mp3')),
            ph_am_mp3=_text(symbol.get('ph_am_mp3')),
            ph_tts_mp3=_text(symbol.get('ph_tts_mp3')),
            parts=[
                EnglishPart(part=_text(part.get('part')), means=_string_list(part.get('means')))
                for part in _mapping_list(symbol.get('parts'))
            ],
        )
        for symbol in _mapping_list(data.get('symbols'))
    ]
    return EnglishWordRecord(
        word_name=_text(data['word_name']),
        is_common_word=_int(data.get('is_CRI')),
        exchange=_parse_exchange(data.get('exchange')),
        symbols=symbols,
        items=_string_list(data.get('items')),
    )


def _parse_chinese_meaning(value: Any) -> ChineseMeaning:
    if isinstance(value, Mapping):
        return ChineseMeaning(
            word_mean=_text(value.get('word_mean')),
            has_mean=_text(value.get('has_mean')),
            split=_int(value.get('split')),
        )
    # Some entries carry a bare string instead of a meaning object
    return ChineseMeaning(word_mean=_text(value))


def _parse_chinese(data: Mapping[str, Any]) -> ChineseWordRecord:
    symbols = []
    for symbol in _mapping_list(data.get('symbols')):
        parts = []
        for part in _mapping_list(symbol.get('parts')):
            means = part.get('means')
            if not isinstance(means, list):
                means = []
            parts.append(ChinesePart(
                part_name=_text(part.get('part_name')),
                means=[_parse_chinese_meaning(mean) for mean in means if mean is not None],
            ))
        symbols.append(ChineseSymbol(
            word_symbol=_text(symbol.get('word_symbol')),
            symbol_mp3=_text(symbol.get('symbol_mp3')),
            parts=parts,
        ))
    return ChineseWordRecord(word_name=_text(data['word_name']), symbols=symbols)


def parse_word_record(data: Any) -> Optional[WordRecord]:
    """Turn a decoded API payload into a word record.

    Returns None when the payload is not an object or has no headword, which
    is how the API reports an unknown word.
    """
    if not isinstance(data, Mapping) or not data.get('word_name'):
        return None

    if classify_headword(_text(data['word_name'])) is WordKind.ENGLISH:
        return _parse_english(data)
    return _parse_chinese(data)
