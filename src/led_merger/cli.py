"""Command-line interface for led-merger."""

import argparse
import json
import logging
import sys
from pathlib import Path

from led_merger.codec import DecodeError, decode_mappings
from led_merger.commands import timestamped_filename
from led_merger.merge import ConfigurationLoader, ConfigurationMerger, MergeError
from led_merger.slot_frames import SlotSource, apply_concatenated_pages, concatenate_slot_frames
from led_merger.stores import FileSystemStore, StoreError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _default_output(base_path: Path) -> Path:
    return base_path.parent / timestamped_filename(base_path.name)


def parse_source(value: str) -> tuple[Path, int]:
    """Parse a ``PATH:SLOT`` source argument."""
    path, sep, slot = value.rpartition(":")
    if not sep or not path or not slot.isdigit():
        raise argparse.ArgumentTypeError(
            f"source must look like PATH:SLOT, got {value!r}"
        )
    return Path(path), int(slot)


def show_config(args: argparse.Namespace) -> int:
    """Execute the show command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = ConfigurationLoader(FileSystemStore()).load(str(args.config))
    except StoreError as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1

    logger.info(f"Configuration: {args.config}")
    logger.info(f"  Declared pages: {config.page_count}")
    logger.info(f"  Pages: {len(config.pages)}")
    for page in config.pages:
        line = (
            f"    - slot {page.page_index}: {len(page.frames.frame_list)} frames, "
            f"lightness {page.lightness}, speed {page.speed_ms} ms"
        )
        if page.comment:
            line += f" ({page.comment})"
        logger.info(line)

    return 0


def merge_config(args: argparse.Namespace) -> int:
    """Execute the merge command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    mappings_path = args.mappings.resolve()
    if not mappings_path.exists():
        logger.error(f"Mappings file not found: {mappings_path}")
        return 1

    source_dir = args.source_dir or mappings_path.parent
    output_path = args.output or _default_output(args.base)

    try:
        mappings = decode_mappings(json.loads(mappings_path.read_text(encoding="utf-8")))

        store = FileSystemStore(source_dir)
        base = ConfigurationLoader(store).load(str(args.base.resolve()))
        merged = ConfigurationMerger(store).merge(base, mappings)
        store.save(merged, str(output_path.resolve()))

    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read mappings: {e}")
        return 1
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse mappings: {e}")
        return 1
    except (DecodeError, StoreError, MergeError) as e:
        logger.error(f"Failed to merge configuration: {e}")
        for detail in getattr(e, "errors", []):
            logger.error(f"    - {detail}")
        return 1

    logger.info(f"Merged configuration: {args.base}")
    logger.info(f"  Mappings applied: {len(mappings)}")
    logger.info(f"  Output: {output_path}")

    return 0


def concat_frames(args: argparse.Namespace) -> int:
    """Execute the concat command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    store = FileSystemStore()
    output_path = args.output or _default_output(args.base)

    try:
        base = store.load(str(args.base))
        sources = [
            SlotSource(store.load(str(path)), source_slot)
            for path, source_slot in args.source
        ]
    except StoreError as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1

    concatenated = concatenate_slot_frames(sources)
    if not concatenated.is_valid:
        logger.error(f"Cannot build slot {args.slot}: {concatenated.warning}")
        return 1

    if base.get_page(args.slot) is None:
        logger.error(f"Slot {args.slot} not found in {args.base}")
        return 1

    merged = apply_concatenated_pages(base, {args.slot: concatenated})

    try:
        store.save(merged, str(output_path))
    except StoreError as e:
        logger.error(f"Failed to save configuration: {e}")
        return 1

    logger.info(f"Slot {args.slot}: {concatenated.total_frames} frames from {len(sources)} sources")
    logger.info(f"  Output: {output_path}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="led-merger",
        description="Merge animation pages between LED device configurations",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Summarize the pages of a configuration",
        description="Load an LED configuration and list its pages with their frame counts.",
    )
    show_parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to the configuration file",
    )
    show_parser.set_defaults(func=show_config)

    merge_parser = subparsers.add_parser(
        "merge",
        help="Apply merge mappings to a base configuration",
        description="Apply a JSON list of merge mappings (keep, replace, combine) to a base configuration and save the result.",
    )
    merge_parser.add_argument(
        "--base",
        type=Path,
        required=True,
        help="Path to the base configuration",
    )
    merge_parser.add_argument(
        "--mappings",
        type=Path,
        required=True,
        help="Path to a JSON file holding the list of merge mappings",
    )
    merge_parser.add_argument(
        "--source-dir",
        type=Path,
        default=None,
        help="Directory that relative sourceFile paths resolve against (default: directory of the mappings file)",
    )
    merge_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output path (default: <base>_<timestamp>.json next to the base file)",
    )
    merge_parser.set_defaults(func=merge_config)

    concat_parser = subparsers.add_parser(
        "concat",
        help="Chain frames from several files into one slot",
        description="Concatenate the frames of pages from several configurations into one slot of a base configuration.",
    )
    concat_parser.add_argument(
        "--base",
        type=Path,
        required=True,
        help="Path to the base configuration",
    )
    concat_parser.add_argument(
        "--slot",
        type=int,
        required=True,
        help="Slot of the base configuration to fill",
    )
    concat_parser.add_argument(
        "--source",
        type=parse_source,
        action="append",
        required=True,
        help="Source page as PATH:SLOT; repeat in order, the first one is the base page",
    )
    concat_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output path (default: <base>_<timestamp>.json next to the base file)",
    )
    concat_parser.set_defaults(func=concat_frames)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
