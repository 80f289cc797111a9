"""
Server-side validation rules.

A rule is attached to one node (its owner). When the owner is validated the
rule checks the owner's value; on failure it sets the owner's error message.
Rules created with ``client_side=True`` also provide a script fragment that
the form passes to the renderer's script builder.
"""

import json
import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

from formtree.exceptions import InvalidInputError

if TYPE_CHECKING:
    from formtree.core.node import Node


def is_empty(value: Any) -> bool:
    """Whether a value counts as "nothing entered"."""
    return value is None or value == "" or (isinstance(value, (list, dict)) and not value)


class Rule(ABC):
    """
    Abstract base class for validation rules.

    Params:
        message: Error message set on the owner when validation fails
        config: Rule specific configuration
        client_side: Whether the rule also runs in the browser
    """

    rule_type: ClassVar[str] = "rule"
    default_message: ClassVar[str] = "Invalid value"

    def __init__(self, message: str = "", config: Any = None, client_side: bool = False):
        self.message = message or self.default_message
        self.config = self.validate_config(config)
        self.client_side = client_side
        self.owner: "Node | None" = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, config={self.config!r})"

    def validate_config(self, config: Any) -> Any:
        """Check and normalize the configuration; subclasses override."""
        return config

    def set_owner(self, owner: "Node | None") -> None:
        self.owner = owner

    def validate(self) -> bool:
        """
        Check the owner's value and set its error on failure.

        Raises:
            InvalidInputError: If the rule is not attached to a node
        """
        if self.owner is None:
            raise InvalidInputError(f"{type(self).__name__} is not attached to any element")
        valid = self.validate_owner()
        if not valid and not self.owner.get_error():
            self.owner.set_error(self.message)
        return valid

    @abstractmethod
    def validate_owner(self) -> bool:
        """Return whether the owner's current value satisfies the rule."""
        pass

    def get_javascript(self) -> str:
        """Return the client-side check for this rule, or an empty string."""
        if not self.client_side or self.owner is None:
            return ""
        return "qf.rules.{}({}, {}, {})".format(
            self.rule_type,
            json.dumps(self.owner.get_id()),
            json.dumps(self.javascript_config()),
            json.dumps(self.message),
        )

    def javascript_config(self) -> Any:
        return self.config


class Required(Rule):
    """The owner must have a non-empty value."""

    rule_type = "required"
    default_message = "This field is required"

    def validate_owner(self) -> bool:
        return not is_empty(self.owner.get_value())


class Regex(Rule):
    """
    A non-empty value must match a regular expression.

    Params:
        config: Pattern string or compiled pattern; matched with ``re.search``
    """

    rule_type = "regex"

    def validate_config(self, config: Any) -> re.Pattern:
        if isinstance(config, re.Pattern):
            return config
        if not isinstance(config, str) or not config:
            raise InvalidInputError("Regex rule requires a pattern")
        return re.compile(config)

    def validate_owner(self) -> bool:
        value = self.owner.get_value()
        if is_empty(value):
            return True
        return self.config.search(str(value)) is not None

    def javascript_config(self) -> str:
        return self.config.pattern


class Length(Rule):
    """
    A non-empty value must have a length within bounds.

    Params:
        config: Exact length as an int, or a ``(min, max)`` tuple where either
            bound may be None
    """

    rule_type = "length"

    def validate_config(self, config: Any) -> tuple[int | None, int | None]:
        if isinstance(config, int):
            return (config, config)
        if (
            isinstance(config, (tuple, list))
            and len(config) == 2
            and all(bound is None or isinstance(bound, int) for bound in config)
            and any(bound is not None for bound in config)
        ):
            return (config[0], config[1])
        raise InvalidInputError("Length rule requires a length or a (min, max) pair")

    def validate_owner(self) -> bool:
        value = self.owner.get_value()
        if is_empty(value):
            return True
        minimum, maximum = self.config
        length = len(value) if isinstance(value, (str, list, dict)) else len(str(value))
        if minimum is not None and length < minimum:
            return False
        return maximum is None or length <= maximum

    def javascript_config(self) -> list[int | None]:
        return list(self.config)


class Callback(Rule):
    """
    The value is checked by a Python callable.

    Params:
        config: Callable receiving the owner's value and returning a bool
    """

    rule_type = "callback"

    def validate_config(self, config: Any) -> Callable[[Any], bool]:
        if not callable(config):
            raise InvalidInputError("Callback rule requires a callable")
        return config

    def validate_owner(self) -> bool:
        return bool(self.config(self.owner.get_value()))

    def get_javascript(self) -> str:
        # Python callables have no browser counterpart
        return ""


RULE_TYPES: dict[str, type[Rule]] = {
    "required": Required,
    "regex": Regex,
    "length": Length,
    "callback": Callback,
}


def register_rule(rule_type: str, rule_class: type[Rule]) -> None:
    """
    Make a rule class available under a type name.

    Raises:
        InvalidInputError: If rule_class is not a Rule subclass
    """
    if not (isinstance(rule_class, type) and issubclass(rule_class, Rule)):
        raise InvalidInputError(f"Class registered for '{rule_type}' should be a Rule subclass")
    RULE_TYPES[rule_type.lower()] = rule_class


def create_rule(rule_type: str, message: str = "", config: Any = None) -> Rule:
    """
    Create a rule from its registered type name.

    Raises:
        InvalidInputError: If the type name is not registered
    """
    rule_class = RULE_TYPES.get(str(rule_type).lower())
    if rule_class is None:
        raise InvalidInputError(
            f"Rule '{rule_type}' is not known. Available rules: {sorted(RULE_TYPES)}"
        )
    return rule_class(message, config)
