"""Canvas identifiers and course/group/user contexts."""

from dataclasses import dataclass
from enum import Enum

SHARD_FACTOR = 10_000_000_000_000


def expand_tilde_id(value: str) -> str:
    """Expand a sharded ``"shard~id"`` identifier into its global form.

    ``"1~2"`` becomes ``"10000000000002"``. Anything else is returned
    unchanged.
    """
    parts = value.split("~")
    if len(parts) == 2 and parts[0].isdigit() and parts[1].isdigit():
        return str(int(parts[0]) * SHARD_FACTOR + int(parts[1]))
    return value


class ContextKind(Enum):
    ACCOUNT = "accounts"
    COURSE = "courses"
    GROUP = "groups"
    USER = "users"


@dataclass(frozen=True, slots=True)
class ContextRef:
    """The course, group, user or account a URL is scoped to."""

    kind: ContextKind
    id: str

    @classmethod
    def course(cls, id: str) -> "ContextRef":
        return cls(ContextKind.COURSE, id)

    @classmethod
    def group(cls, id: str) -> "ContextRef":
        return cls(ContextKind.GROUP, id)

    @classmethod
    def from_path(cls, path: str) -> "ContextRef | None":
        """Read the context from the first two segments of *path*.

        ``/courses/1~2/files`` -> ``ContextRef(COURSE, "10000000000002")``.
        Returns ``None`` if the path is not context-scoped.
        """
        parts = [p for p in path.split("?")[0].split("/") if p]
        if len(parts) < 2:
            return None
        try:
            kind = ContextKind(parts[0])
        except ValueError:
            return None
        return cls(kind, expand_tilde_id(parts[1]))

    @property
    def is_course(self) -> bool:
        return self.kind is ContextKind.COURSE

    def __str__(self) -> str:
        return f"{self.kind.value}/{self.id}"


CURRENT_USER = ContextRef(ContextKind.USER, "self")
