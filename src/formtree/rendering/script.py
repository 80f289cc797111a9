"""
Collector for client-side validation scripts.
"""

import json

from formtree.exceptions import InvalidInputError


class ScriptBuilder:
    """
    Collects client-side rule scripts per form.

    The form announces itself with `set_form_id` before its rules are
    rendered; scripts added afterwards belong to that form.
    """

    def __init__(self):
        self._form_id: str | None = None
        self._rules: dict[str, list[str]] = {}

    def set_form_id(self, form_id: str | None) -> None:
        self._form_id = form_id
        if form_id is not None:
            self._rules.setdefault(form_id, [])

    def get_form_id(self) -> str | None:
        return self._form_id

    def add_rule(self, script: str) -> None:
        """
        Add a rule script for the current form.

        Raises:
            InvalidInputError: If no form id was set
        """
        if self._form_id is None:
            raise InvalidInputError("Form id must be set before adding rule scripts")
        self._rules[self._form_id].append(script)

    def get_rules(self, form_id: str) -> list[str]:
        return list(self._rules.get(form_id, []))

    def get_form_javascript(self, form_id: str | None = None, add_script_tags: bool = True) -> str:
        """
        Return the validation setup script for one form.

        Params:
            form_id: Form to build the script for; the current form if None
            add_script_tags: Whether to wrap the script in ``<script>`` tags

        Returns:
            The script, or an empty string when the form has no client rules
        """
        form_id = form_id if form_id is not None else self._form_id
        rules = self._rules.get(form_id or "", [])
        if not rules:
            return ""
        body = "new qf.Validator(document.getElementById({}), [\n{}\n]);".format(
            json.dumps(form_id), ",\n".join(f"  {rule}" for rule in rules)
        )
        if not add_script_tags:
            return body
        return f'<script type="text/javascript">\n//<![CDATA[\n{body}\n//]]>\n</script>'
