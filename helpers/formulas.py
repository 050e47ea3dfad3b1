"""Pure math formulas - no dependencies, easily testable."""
from math import cos, floor, pi, sin

INT32_MASK = 0xFFFFFFFF
INT32_SIGN = 0x80000000


def round1(value: float) -> float:
    """Round to one decimal, halves away from zero."""
    scaled = value * 10
    rounded = floor(abs(scaled) + 0.5)
    return (rounded if scaled >= 0 else -rounded) / 10


def vote_percentages(votes_a: int, votes_b: int) -> tuple[float, float]:
    """Percent of votes per variant. 50/50 when nobody voted."""
    total = votes_a + votes_b
    if not total:
        return 50.0, 50.0
    return round1(votes_a / total * 100), round1(votes_b / total * 100)


def controversy(votes_a: int, votes_b: int) -> float | None:
    """Distance from a 50/50 split in percentage points (None without votes)."""
    total = votes_a + votes_b
    if not total:
        return None
    return abs(votes_a / total * 100 - votes_b / total * 100)


def estimated_participants(total_votes: int) -> int:
    """Rough head count: a visitor casts about three votes."""
    return total_votes // 3


def string_hash(text: str) -> int:
    """Rolling hash*31 + code unit over UTF-16, wrapped to signed 32-bit."""
    data = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & INT32_MASK
    return h - (1 << 32) if h & INT32_SIGN else h


def polar_to_cartesian(cx: float, cy: float, radius: float, angle_deg: float) -> tuple[float, float]:
    """Point on a circle, angle measured clockwise from 12 o'clock."""
    rad = (angle_deg - 90) * pi / 180.0
    return cx + radius * cos(rad), cy + radius * sin(rad)


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(value)


def radar_path(
    values: list[float],
    width: float,
    height: float,
    padding: float,
    distortion: float = 0,
    seed: float = 1,
) -> str:
    """SVG path through radar points (values 0-100), closed with Z."""
    if not values:
        return ""

    cx, cy = width / 2, height / 2
    radius = min(width, height) / 2 - padding
    step = 360 / len(values)

    points = []
    for i, value in enumerate(values):
        noise = sin(i * seed) * cos(seed * i) * distortion if distortion > 0 else 0
        adjusted = max(0, min(100, value + noise))
        points.append(polar_to_cartesian(cx, cy, adjusted / 100 * radius, i * step))

    parts = [f"{'M' if i == 0 else 'L'} {_fmt(x)},{_fmt(y)}" for i, (x, y) in enumerate(points)]
    return " ".join(parts) + " Z"
