"""Version drift classifier (UNO: single function)."""

_LEVELS = ("major", "minor", "patch")


def _parse_version(version: str) -> tuple[int, int, int]:
    numbers = []
    for part in (str(version).split(".") + ["0", "0", "0"])[:3]:
        try:
            numbers.append(int(part))
        except ValueError:
            numbers.append(0)
    return numbers[0], numbers[1], numbers[2]


def calculate_version_severity(expected: str, current: str) -> str:
    """Classify how far ``current`` drifted from ``expected``.

    Returns:
        ``<major|minor|patch>_<upgrade|downgrade>`` for the most significant
        differing component, or ``match``
    """
    for level, want, have in zip(_LEVELS, _parse_version(expected), _parse_version(current)):
        if have > want:
            return f"{level}_upgrade"
        if have < want:
            return f"{level}_downgrade"
    return "match"
