import re

_DATE_RE = re.compile(r"(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{2,4})", re.ASCII)


def extract_date(text: str) -> str | None:
    """Return the first day/month/year date in ``text`` as ``YYYY-MM-DD``.

    Two-digit years are read as 20xx. Components are not checked against the
    calendar, so ``31/04/2025`` comes back as ``2025-04-31``.
    """
    match = _DATE_RE.search(text)
    if match is None:
        return None
    day, month, year = match.groups()
    if len(year) == 2:
        year = f"20{year}"
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"
