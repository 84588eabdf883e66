# paths.py
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import unquote


@dataclass(frozen=True)
class DrivePath:
    """
    A slash-delimited path as an ordered tuple of segment names.

    "/" is ("",) and a trailing slash leaves an empty final segment, which
    the resolver reads as "the folder containing this point".
    """

    segments: Tuple[str, ...]

    @classmethod
    def from_string(cls, path: Optional[str]) -> Optional["DrivePath"]:
        """Returns None when no path was given at all."""
        if not path:
            return None
        if path.startswith("/"):
            path = path[1:]
        return cls(tuple(path.split("/")))

    @classmethod
    def join(cls, prefix: str, relative_path: str) -> Optional["DrivePath"]:
        """Prefixes a percent-encoded request path with the configured subfolder."""
        return cls.from_string(prefix + unquote(relative_path or ""))

    @classmethod
    def root(cls) -> "DrivePath":
        return cls(("",))

    @property
    def is_root(self) -> bool:
        return self.segments == ("",)

    @property
    def name(self) -> str:
        return self.segments[-1]

    @property
    def parent(self) -> "DrivePath":
        if len(self.segments) <= 1:
            return DrivePath.root()
        return DrivePath(self.segments[:-1])

    def __str__(self) -> str:
        return "/" + "/".join(self.segments)
