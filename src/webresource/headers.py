from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from requests.structures import CaseInsensitiveDict


class HttpHeaders(CaseInsensitiveDict):
    """Case-insensitive header collection.

    Setting a name that differs only by case from an existing one replaces the
    entry in place; the stored name takes the casing of the last set.
    """

    def __init__(self, headers: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__()
        for name, value in (headers or {}).items():
            self.set(name, value)

    def set(self, name: str, value: Any) -> None:
        self[name] = str(value)

    def clone(self) -> "HttpHeaders":
        return HttpHeaders(self)

    def copy(self) -> "HttpHeaders":
        return self.clone()

    def to_dict(self) -> Dict[str, str]:
        return dict(self.items())


__all__ = ["HttpHeaders"]
