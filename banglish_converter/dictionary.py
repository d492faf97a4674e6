import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from .tables import GraphemeTable, TableError, validate_dictionary

logger = logging.getLogger(__name__)


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with repeated keys"""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise TableError(
                    f"duplicate dictionary word {key!r} at line {key_node.start_mark.line + 1}"
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def dictionary_from_mapping(name: str, words: Mapping) -> GraphemeTable:
    """Build a dictionary table, lower-casing every Banglish word"""
    pairs = []
    for word, bengali in words.items():
        if not isinstance(word, str) or not isinstance(bengali, str):
            raise TableError(f"{name}: entries must be strings, got {word!r}: {bengali!r}")
        pairs.append((word.strip().lower(), bengali.strip()))
    table = GraphemeTable(name, pairs)
    validate_dictionary(table)
    return table


def load_dictionary(path) -> GraphemeTable:
    """Load a YAML mapping of Banglish word -> Bengali spelling"""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.load(f, Loader=_UniqueKeyLoader)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TableError(f"{path}: expected a mapping of words, got {type(data).__name__}")

    table = dictionary_from_mapping(path.name, data)
    logger.debug("Loaded %d dictionary words from %s", len(table), path)
    return table


def merge_dictionaries(base: Mapping, extra: Mapping) -> GraphemeTable:
    """New dictionary with entries from `extra` overriding `base`"""
    merged = dict(base)
    merged.update(extra)
    return GraphemeTable("merged dictionary", merged.items())
