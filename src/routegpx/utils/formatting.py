"""Human readable distances and durations."""


def format_distance(meters: int) -> str:
    """Meters below one kilometer, otherwise kilometers with one decimal."""
    if meters < 1000:
        return f"{meters} m"
    return f"{meters / 1000:.1f} km"


def format_duration(seconds: int) -> str:
    """Hours and minutes, or just minutes under an hour."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)

    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes} min"
