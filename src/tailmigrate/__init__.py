"""
tailmigrate: converts design-system spacing props into utility classes for style migrations.
"""

__all__ = ["convert_props", "convert_spacing", "normalize_spacing"]


def convert_spacing(*args, **kwargs):
    from tailmigrate.spacing.convert import convert_spacing as _convert_spacing

    return _convert_spacing(*args, **kwargs)


def normalize_spacing(*args, **kwargs):
    from tailmigrate.spacing.normalize import normalize_spacing as _normalize_spacing

    return _normalize_spacing(*args, **kwargs)


def convert_props(*args, **kwargs):
    from tailmigrate.spacing.batch import convert_props as _convert_props

    return _convert_props(*args, **kwargs)
