"""Configuration merger.

Applies an ordered list of merge mappings to a base configuration. Each
mapping addresses one base slot and either keeps it, replaces its frames with
those of a page from another configuration, or appends that page's frames.

Mappings are applied strictly in order: a later mapping for the same slot
sees (and may overwrite) the effect of an earlier one.
"""

import logging
from collections.abc import Iterable

from led_merger.stores.store import ConfigurationStore
from schemas.led_configuration import LEDConfiguration, PageData, find_page
from schemas.merge_mapping import MergeAction, MergeMapping

from .exceptions import InvalidInstructionError, TargetSlotNotFoundError, UnknownActionError

logger = logging.getLogger(__name__)


class ConfigurationMerger:
    """Merges pages from source configurations into a base configuration.

    Source configurations are loaded through the injected store each time a
    mapping refers to them.

    Example:
        merger = ConfigurationMerger(FileSystemStore(Path("./configs")))
        merged = merger.merge(base, [
            MergeMapping.new(5, MergeAction.REPLACE).with_source_file("fire.json"),
            MergeMapping.new(6, MergeAction.COMBINE).with_source_file("wave.json").with_target_slot(2),
        ])
    """

    def __init__(self, store: ConfigurationStore):
        self.store = store

    def merge(
        self,
        base: LEDConfiguration,
        mappings: Iterable[MergeMapping],
    ) -> LEDConfiguration:
        """Apply ``mappings`` to a copy of ``base``.

        Args:
            base: The base configuration; it is not modified
            mappings: Mappings to apply, in order

        Returns:
            The merged configuration

        Raises:
            InvalidInstructionError: If a mapping is not valid
            TargetSlotNotFoundError: If the base has no page for a mapping's slot
            UnknownActionError: If a mapping names an unknown action
            StoreError: If a source configuration cannot be loaded
        """
        merged = base.model_copy(deep=True)
        applied = 0

        for mapping in mappings:
            self._apply(merged, mapping)
            applied += 1

        logger.info(f"Merged {applied} mappings into configuration")
        return merged

    def _apply(self, merged: LEDConfiguration, mapping: MergeMapping) -> None:
        if not mapping.is_valid():
            raise InvalidInstructionError(mapping.slot)

        target = find_page(merged, mapping.slot)
        if target is None:
            raise TargetSlotNotFoundError(mapping.slot)

        action = mapping.merge_action
        if action is MergeAction.KEEP:
            logger.debug(f"Slot {mapping.slot}: keep")
            return
        elif action is MergeAction.REPLACE or action is MergeAction.COMBINE:
            source_page = self._resolve_source_page(mapping)
            if source_page is None:
                return
            if action is MergeAction.REPLACE:
                replace_frames(target, source_page)
            else:
                combine_frames(target, source_page)
            logger.debug(
                f"Slot {mapping.slot}: {action.value} from {mapping.source_file}, "
                f"now {len(target.frames.frame_list)} frames"
            )
        else:
            raise UnknownActionError(mapping.action)

    def _resolve_source_page(self, mapping: MergeMapping) -> PageData | None:
        """Load the mapping's source configuration and pick its page.

        Returns the page at ``target_slot`` if given, else the first page, or
        None when there is no such page.
        """
        source = self.store.load(mapping.source_file)

        if mapping.target_slot is not None:
            page = find_page(source, mapping.target_slot)
        else:
            page = source.pages[0] if source.pages else None

        if page is None:
            logger.debug(
                f"Slot {mapping.slot}: no source page in {mapping.source_file} "
                f"(target slot {mapping.target_slot}), skipping"
            )
        return page


def replace_frames(target: PageData, source: PageData) -> None:
    """Overwrite the target page's frames with a copy of the source's."""
    target.frames = source.frames.model_copy(deep=True)


def combine_frames(target: PageData, source: PageData) -> None:
    """Append copies of the source page's frames to the target page.

    The frame count is recomputed; every other field is left alone.
    """
    combined = target.frames.frame_list + [
        frame.model_copy(deep=True) for frame in source.frames.frame_list
    ]
    target.frames.frame_list = combined
    target.frames.frame_count = len(combined)


def merge_configurations(
    store: ConfigurationStore,
    base: LEDConfiguration,
    mappings: Iterable[MergeMapping],
) -> LEDConfiguration:
    """Merge ``mappings`` into ``base`` using ``store`` for source configurations."""
    return ConfigurationMerger(store).merge(base, mappings)
