"""Small string predicates."""


def ends_with(text: str, suffix: str) -> bool:
    """True when ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def starts_with(text: str, prefix: str) -> bool:
    """True when ``text`` starts with ``prefix``."""
    return text.startswith(prefix)