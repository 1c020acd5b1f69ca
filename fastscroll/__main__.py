"""
Demo: build a sample alphabetical grid and print its fast-scroll table.

Usage:
    python -m fastscroll --count 100 --per-row 4 --policy by_rows
"""
import argparse
import random
import string
from typing import List, Optional

from fastscroll.core.logging import setup_logging
from fastscroll.applist import AlphabeticalItemList, AppItem, FractionPolicy, SortMode


def make_demo_items(count: int, seed: Optional[int] = None) -> List[AppItem]:
    """Items titled "<Letter>-Box <n>" with a random capital letter."""
    rng = random.Random(seed)
    return [
        AppItem(id=f"box-{num}", title=f"{rng.choice(string.ascii_uppercase)}-Box {num}")
        for num in range(1, count + 1)
    ]


def format_sections(apps: AlphabeticalItemList) -> str:
    lines = [f"{'section':<8} {'fraction':>8} {'position':>8} {'row':>4} {'col':>4}  title"]
    for section in apps.fast_scroll_sections:
        entry = section.scroll_to_entry
        fraction = "-" if section.touch_fraction is None else f"{section.touch_fraction:.4f}"
        row = "-" if entry.row_index is None else str(entry.row_index)
        col = "-" if entry.row_column is None else str(entry.row_column)
        lines.append(f"{section.section_name:<8} {fraction:>8} {entry.position:>8} {row:>4} {col:>4}  {entry.title}")
    lines.append(f"{len(apps.adapter_entries)} entries, {len(apps.fast_scroll_sections)} sections, {apps.num_rows} rows")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print the fast-scroll sections of a demo app grid")
    parser.add_argument("--count", type=int, default=100, help="Number of demo items")
    parser.add_argument("--per-row", type=int, default=4, help="Items per grid row (0 = layout unknown)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for demo titles")
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in FractionPolicy],
        default=FractionPolicy.DISTRIBUTE_BY_NUM_SECTIONS.value,
        help="Touch fraction distribution",
    )
    parser.add_argument(
        "--sort-mode",
        choices=[mode.value for mode in SortMode],
        default=SortMode.FIRST_CHAR.value,
        help="Item ordering before sectioning",
    )
    parser.add_argument("--debug", action="store_true", help="Log rebuilds to stderr")
    args = parser.parse_args(argv)

    setup_logging(debug_mode=args.debug)

    apps = AlphabeticalItemList(
        num_apps_per_row=args.per_row,
        sort_mode=SortMode(args.sort_mode),
        fraction_policy=FractionPolicy(args.policy),
    )
    apps.set_items(make_demo_items(args.count, args.seed))
    print(format_sections(apps))


if __name__ == "__main__":
    main()
