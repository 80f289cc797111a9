"""
Global rendering and naming options.

Options are held in a single immutable value object; changing them replaces
the object as a whole so that a half-updated configuration is never visible.
"""

from typing import Any

import attrs
from attrs import frozen


@frozen
class Options:
    """Library-wide options.

    Params:
        linebreak: Separator used when containers are converted to strings
        id_force_append_index: Always append a counter to generated ids, even
            when the name alone would produce a usable id
    """

    linebreak: str = "\n"
    id_force_append_index: bool = True


_options = Options()


def get_options() -> Options:
    """Return the current options object."""
    return _options


def get_option(name: str) -> Any:
    """Return the value of a single option.

    Params:
        name: Option name (an attribute of `Options`)

    Raises:
        KeyError: If the option does not exist.
    """
    if name not in attrs.fields_dict(Options):
        raise KeyError(
            f"Unknown option '{name}'. Available options: {list(attrs.fields_dict(Options))}"
        )
    return getattr(_options, name)


def set_options(**changes: Any) -> Options:
    """Replace selected options.

    Params:
        **changes: New option values keyed by option name

    Returns:
        The options object that was active before the change, so callers can
        restore it.

    Raises:
        KeyError: If an option name does not exist.
    """
    global _options
    unknown = set(changes) - set(attrs.fields_dict(Options))
    if unknown:
        raise KeyError(f"Unknown options: {sorted(unknown)}")
    previous = _options
    _options = attrs.evolve(_options, **changes)
    return previous


def reset_options(options: Options | None = None) -> None:
    """Restore the given options, or the defaults."""
    global _options
    _options = options if options is not None else Options()
