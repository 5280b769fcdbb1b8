"""Screen descriptors returned by the student route handlers.

A descriptor names the screen and carries the arguments its factory needs.
Building the real view is up to the presentation layer.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Screen:
    name: str
    args: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.args[key]


class AssetType:
    ASSIGNMENT = "assignment"
    DISCUSSION = "discussion"
    FILE = "file"
    MODULE_ITEM = "moduleItem"
    PAGE = "page"
    QUIZ = "quiz"


def module_item_sequence(course_id: str, asset_type: str, asset_id: str, url: Any) -> Screen:
    """Course content opened outside module-item details is shown in sequence."""
    return Screen(
        "ModuleItemSequence",
        {"course_id": course_id, "asset_type": asset_type, "asset_id": asset_id, "url": url},
    )
