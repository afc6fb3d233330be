"""A small read-only map interface over pair lists and dicts."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any


class JsMap(ABC):
    """Read-only key/value view offering lookup, entries and keys."""

    @abstractmethod
    def get_value(self, key: Hashable) -> Any | None:
        """Return the value stored under ``key``, or None if absent."""

    @abstractmethod
    def entries(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in the map's own order."""

    def keys(self) -> Iterator[Any]:
        """Yield the keys in entry order."""
        return (key for key, _ in self.entries())


class PairListMap(JsMap):
    """Map backed by an ordered list of pairs; lookup finds the first match."""

    def __init__(self, pairs: Iterable[tuple[Any, Any]]) -> None:
        self._pairs = [(key, value) for key, value in pairs]

    def get_value(self, key: Hashable) -> Any | None:
        return next((value for k, value in self._pairs if k == key), None)

    def entries(self) -> Iterator[tuple[Any, Any]]:
        return iter(self._pairs)


class DictMap(JsMap):
    """Map backed by a dict."""

    def __init__(self, mapping: Mapping[Any, Any]) -> None:
        self._mapping = dict(mapping)

    def get_value(self, key: Hashable) -> Any | None:
        return self._mapping.get(key)

    def entries(self) -> Iterator[tuple[Any, Any]]:
        return iter(self._mapping.items())


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def render_js_map(js_map: JsMap) -> str:
    """Describe a map: its entries, its keys, then entries sorted by key."""
    parts = ["\nentries: \n\t"]
    parts.extend(f"({_display(k)}, {_display(v)}), " for k, v in js_map.entries())
    parts.append("\nkeys: \n\t")
    parts.extend(f"{_display(k)}, " for k in js_map.keys())
    parts.append("\n\nsorted_by_key: \n")
    ordered = sorted(js_map.entries(), key=lambda entry: entry[0])
    parts.extend(f"\t{_display(k)}: {_display(v)}\n" for k, v in ordered)
    return "".join(parts)


def _show(title: str, js_map: JsMap) -> None:
    print(f"\n~~~~{title}~~~~")
    print(render_js_map(js_map), end="")


def run_version_1() -> None:
    """Print the description of a string pair list and an int-keyed dict."""
    pairs = PairListMap([("3ho", "!!!!!!!!!"), ("2ya", "~!~!~"), ("1mu", "~~!")])
    by_int = DictMap({1: "mu", 2: "ya", 3: "ho"})
    print("test begin")
    _show("pair list (str -> str)", pairs)
    _show("dict (int -> str)", by_int)


def run_version_2() -> None:
    """Print descriptions of numeric and string maps in both backings."""
    vec_i_f = PairListMap([(122, 9.343), (121, 2.6), (120, 5.5)])
    hm_i_f = DictMap({3: 24.36, 4: 2.436, 5: 243.6, 6: 2.436})
    vec_str_str = PairListMap([("3ho", "!!!!!!!!!"), ("2ya", "~!~!~"), ("1mu", "~~!")])
    hm_str_str = DictMap({"a": "mu", "b": "ya", "c": "ho"})
    print("test begin")
    _show("pair list (int -> float)", vec_i_f)
    _show("dict (int -> float)", hm_i_f)
    _show("pair list (str -> str)", vec_str_str)
    _show("dict (str -> str)", hm_str_str)