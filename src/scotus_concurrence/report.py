"""Console reports for the preprocessing step and the text viewer."""

from pathlib import Path

from scotus_concurrence.models import Dataset, Member, View


def print_header(title: str) -> None:
    """Print a visually distinct section header to stdout."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def member_label(member: Member, max_period: int | None) -> str:
    """Row label: name, service years and party marker.

    Members still voting in the last period of the data get an open-ended
    span ("2005-").
    """
    serving = max_period is not None and member.last_period >= max_period
    years = f"{member.first_period}-" if serving else f"{member.first_period}-{member.last_period}"
    party = f"({member.affiliation.value})" if member.affiliation else ""
    return f"{member.name} {years} {party}".strip()


def unmapped_members(dataset: Dataset) -> list[str]:
    """Identifiers with no known affiliation, in first-period order."""
    ordered = sorted(dataset.members.values(), key=lambda m: m.first_period)
    return [m.member_id for m in ordered if m.affiliation is None]


def print_dataset_summary(
    dataset: Dataset,
    output_path: Path | None = None,
    file_size: int | None = None,
    rejected: dict[str, int] | None = None,
) -> None:
    """Summarize a freshly built dataset: counts, members and missing parties."""
    if output_path is not None:
        print(f"\nOutput written to: {output_path}")
    if file_size is not None:
        print(f"  File size: {file_size / (1024 * 1024):.2f} MB")
    print(f"  Term range: {dataset.min_period} - {dataset.max_period}")
    print(f"  Total cases: {dataset.total_cases}")
    print(f"  Total justices: {dataset.total_members}")
    if rejected:
        print("  Skipped rows:")
        for reason, count in sorted(rejected.items()):
            print(f"    {reason:20s} {count:>8,}")

    print("\nJustices in database:")
    for member in sorted(dataset.members.values(), key=lambda m: m.first_period):
        party = member.affiliation.value if member.affiliation else "?"
        print(f"  {member.name} ({member.first_period}-{member.last_period}) [{party}]")

    missing = unmapped_members(dataset)
    if missing:
        print("\n" + "!" * 60)
        print(f"  WARNING: {len(missing)} justices missing party information")
        print("!" * 60)
        for member_id in missing:
            print(f"  - {member_id}")
        print("\nAdd these to MEMBER_AFFILIATION in scotus_concurrence/affiliations.py")


def print_view(view: View, dataset: Dataset) -> None:
    """Print the active members and every pair's agreement in a text table."""
    print_header(f"{len(view.members)} justices, {view.case_count} cases")

    if view.is_empty:
        print("  No cases found in this time period.")
        return

    for member_id in view.members:
        member = dataset.members.get(member_id)
        print(f"  {member_label(member, dataset.max_period) if member else member_id}")

    if view.scale_range is None:
        print("\n  Scale: no visualizable spread")
    else:
        rng = view.scale_range
        print(
            f"\n  Scale: {rng.low * 100:.0f}% / {rng.mid * 100:.0f}% / {rng.high * 100:.0f}%"
        )

    print(f"\n  {'Pair':44s} {'Rate':>7s} {'Agreed':>7s} {'Cases':>7s}")
    for a, b, cell in view.pairs():
        name_a = dataset.members[a].name if a in dataset.members else a
        name_b = dataset.members[b].name if b in dataset.members else b
        pair = f"{name_a} & {name_b}"
        if cell.rate is None:
            print(f"  {pair:44s} {'--':>7s} {'':>7s} {'':>7s}  no overlapping cases")
        else:
            print(f"  {pair:44s} {cell.rate * 100:6.1f}% {cell.agreed:>7d} {cell.total:>7d}")
