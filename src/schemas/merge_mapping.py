"""Merge instruction schema.

A merge mapping tells the merger how to populate one slot of the base
configuration:

    {"slot": 5, "action": "keep"}
    {"slot": 5, "action": "replace", "sourceFile": "rainbow.json"}
    {"slot": 6, "action": "combine", "sourceFile": "fire.json", "targetSlot": 2}
"""

from enum import Enum

from pydantic import BaseModel, Field

from .led_configuration import U32


class MergeAction(str, Enum):
    """Actions a merge mapping can request."""

    KEEP = "keep"
    REPLACE = "replace"
    COMBINE = "combine"


class MergeMapping(BaseModel):
    """A single merge instruction.

    ``action`` is kept as the raw string so that documents naming an unknown
    action still load; such mappings are simply not valid.

    Attributes:
        slot: Page index in the base configuration
        action: One of ``keep``, ``replace``, ``combine``
        source_file: Location of the source configuration (wire key ``sourceFile``)
        target_slot: Page index in the source configuration (wire key
            ``targetSlot``); the source's first page is used when absent
    """

    slot: U32
    action: str
    source_file: str | None = Field(default=None, alias="sourceFile")
    target_slot: U32 | None = Field(default=None, alias="targetSlot")

    model_config = {"populate_by_name": True}

    @classmethod
    def new(cls, slot: int, action: MergeAction | str) -> "MergeMapping":
        if isinstance(action, MergeAction):
            action = action.value
        return cls(slot=slot, action=action)

    def with_source_file(self, source_file: str) -> "MergeMapping":
        return self.model_copy(update={"source_file": source_file})

    def with_target_slot(self, target_slot: int) -> "MergeMapping":
        return self.model_copy(update={"target_slot": target_slot})

    @property
    def merge_action(self) -> MergeAction | None:
        """The action as a `MergeAction`, or None if it is not recognised."""
        try:
            return MergeAction(self.action)
        except ValueError:
            return None

    def is_valid(self) -> bool:
        """Check whether this mapping can be applied.

        ``keep`` needs nothing else; ``replace`` and ``combine`` need a source
        file. ``target_slot`` is optional for every action.
        """
        action = self.merge_action
        if action is MergeAction.KEEP:
            return True
        if action in (MergeAction.REPLACE, MergeAction.COMBINE):
            return self.source_file is not None
        return False
