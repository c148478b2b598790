"""Tag groups declared through the ``x-tagGroups`` vendor extension.

Shape (as used by Redoc and similar renderers)::

    "x-tagGroups": [
        {"name": "Accounts", "tags": ["users", "teams"]},
        ...
    ]
"""

from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from oasmore.errors import MalformedExtensionError

from .spec import Specification

TAG_GROUPS_EXTENSION = "x-tagGroups"


class TagGroup(BaseModel):
    """A named group of tag names."""
    name: str
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class TagGroupSet:
    """Ordered collection of tag groups with name-based lookups."""

    def __init__(self, groups: Optional[List[TagGroup]] = None):
        self.groups: List[TagGroup] = list(groups or [])

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[TagGroup]:
        return iter(self.groups)

    def get(self, name: str) -> Optional[TagGroup]:
        for group in self.groups:
            if group.name == name:
                return group
        return None

    def get_tag_group_names_for_tag_names(self, *tag_names: str) -> List[str]:
        """Names of the groups containing any of ``tag_names``.

        Order is first-seen: input tags in order, and for each tag the
        groups in declaration order. A group name appears at most once.
        """
        names: List[str] = []
        seen = set()
        for tag_name in tag_names:
            tag_name = tag_name.strip()
            if not tag_name:
                continue
            for group in self.groups:
                if group.name in seen:
                    continue
                if tag_name in (t.strip() for t in group.tags):
                    seen.add(group.name)
                    names.append(group.name)
        return names


def tag_groups(spec: Optional[Specification]) -> TagGroupSet:
    """Read the document's tag groups.

    An absent extension yields an empty set. A present but malformed one
    raises MalformedExtensionError.
    """
    if spec is None:
        return TagGroupSet()
    raw, present = spec.get_extension(TAG_GROUPS_EXTENSION)
    if not present or raw is None:
        return TagGroupSet()
    if not isinstance(raw, list):
        raise MalformedExtensionError(
            TAG_GROUPS_EXTENSION, f"expected a list, got {type(raw).__name__}"
        )
    groups = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise MalformedExtensionError(
                TAG_GROUPS_EXTENSION, f"entry {i} is not an object"
            )
        try:
            groups.append(TagGroup.model_validate(item))
        except ValidationError as e:
            raise MalformedExtensionError(TAG_GROUPS_EXTENSION, f"entry {i}: {e}") from e
    return TagGroupSet(groups)
