"""Display helpers for numbers, durations and identifiers."""


def format_number(n: int) -> str:
    """Compact large counts: 1234567 -> '1.2M', 4500 -> '4.5K'."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)


def format_playtime(seconds: int) -> str:
    """Render seconds as 'Xh Ym', or 'Ym' below one hour."""
    hours, remainder = divmod(max(seconds, 0), 3600)
    minutes = remainder // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_skill_name(skill_id: str) -> str:
    """Split a CamelCase skill id: 'StressResistance' -> 'Stress Resistance'."""
    words = []
    for char in skill_id:
        if char.isupper() and words:
            words.append(" ")
        words.append(char)
    return "".join(words)


def format_item_id(tpl: str) -> str:
    """Short label for an item template id."""
    return f"Item {tpl[-8:]}"
