"""Human-friendly "started ... ago" strings."""

from datetime import timedelta


def started_string(elapsed):
    """Format how long ago something started, e.g. ``1h7s ago``.

    ``elapsed`` may be a timedelta or a number of seconds.  Zero-valued
    units are dropped; anything under one second is ``just now``.
    """
    if isinstance(elapsed, timedelta):
        elapsed = elapsed.total_seconds()
    total = max(int(elapsed), 0)
    hours, rem = divmod(total, 3600)
    minutes, seconds = divmod(rem, 60)

    parts = []
    for value, unit in ((hours, "h"), (minutes, "m"), (seconds, "s")):
        if value:
            parts.append(f"{value}{unit}")
    if not parts:
        return "just now"
    return "".join(parts) + " ago"
