"""
Helpers for the way pipeline runners pass task inputs.
"""


def get_delimited(value: str | None, delimiter: str = "\n") -> list[str]:
    """
    Split a multi-value input into its items. Items are stripped of surrounding whitespace and empty items are
    dropped.
    """

    if not value:
        return []
    return [item.strip() for item in value.split(delimiter) if item.strip()]
