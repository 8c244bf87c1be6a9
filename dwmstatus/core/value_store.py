"""Key-value table parsed from flat key=value files such as sysfs uevent."""
from typing import Dict, Iterable, Optional


class ValueStore:
    """Minimal string table with ordered fallback lookups.

    Built fresh for every read; a missing file yields an empty store so
    callers treat it as "no data" rather than a failure.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(values or {})

    @classmethod
    def parse(cls, path: str) -> "ValueStore":
        """Parse the file at path, skipping lines that are not exactly key=value."""
        store = cls()
        try:
            # vendor strings such as MODEL_NAME are not always valid UTF-8
            with open(path, 'r', errors="replace") as f:
                for line in f:
                    parts = line.rstrip("\n").split("=")
                    if len(parts) == 2:
                        store.values[parts[0]] = parts[1]
        except OSError:
            return cls()
        return store

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.values.get(key, default)

    def get_int(self, key: str) -> int:
        """Integer value of key, 0 when absent or not numeric."""
        try:
            return int(self.values[key])
        except (KeyError, ValueError):
            return 0

    def search_int(self, keys: Iterable[str]) -> int:
        """Integer value of the first key present, 0 when none is."""
        for key in keys:
            if key in self.values:
                return self.get_int(key)
        return 0

    def __contains__(self, key: str) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"ValueStore({self.values!r})"
