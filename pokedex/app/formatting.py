import re

NO_DESCRIPTION = "No description available."

_CONTROL_CHARS = re.compile(r"[\f\n\r]")
_DIGITS = re.compile(r"\d+")


def format_name(name: str) -> str:
    """Turn an API identifier into a display name.

    Examples:
        >>> format_name("body-slam")
        'Body Slam'
        >>> format_name("Body Slam")
        'Body Slam'
    """
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def id_from_url(url: str) -> int:
    """Extract the numeric id from a resource url like ``.../pokemon/25/``."""
    return int(url.rstrip("/").rsplit("/", 1)[-1])


def clean_text(text: str) -> str:
    return _CONTROL_CHARS.sub(" ", text)


def english_entry(entries: list[dict]) -> dict | None:
    """Return the first entry whose language is English."""
    for entry in entries:
        if entry.get("language", {}).get("name") == "en":
            return entry
    return None


def english_text(entries: list[dict], field: str) -> str:
    entry = english_entry(entries)
    if entry is None or not entry.get(field):
        return NO_DESCRIPTION
    return clean_text(entry[field])


def tm_number(item_name: str) -> str:
    match = _DIGITS.search(item_name)
    return match.group(0) if match else ""


def tm_display_name(item_name: str, move_name: str) -> str:
    return f"TM{tm_number(item_name)}: {format_name(move_name)}"
