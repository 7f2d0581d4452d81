"""Split dot-qualified field paths into property and owning object names."""


def resolve_nested_name(field: str) -> tuple[str, str | None]:
    """Return (property_name, object_name) for a field path.

    ``"user.address.city"`` -> ``("city", "user.address")``;
    ``"name"`` -> ``("name", None)``, the caller picks the default object.
    """
    parts = field.split(".")
    if len(parts) == 1:
        return field, None
    return parts[-1], ".".join(parts[:-1])
