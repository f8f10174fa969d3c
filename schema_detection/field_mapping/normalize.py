from typing import List


def split_path(path: str) -> List[str]:
    """Split a dotted column path (`venue.address.city`) into its segments."""
    return [part for part in path.split(".") if part != ""] or [path]


def leaf_name(path: str) -> str:
    """Return the last segment of a column path; name patterns match against it."""
    return split_path(path)[-1] if path else ""
