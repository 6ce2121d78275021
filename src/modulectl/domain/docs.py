"""Markdown documentation rendering for driver descriptions.

Pure string builders: no I/O, no clock, no randomness. ``render`` is the
single entry point and concatenates header, commands, and data sections
in that fixed order. Each section builder is independently callable and
takes its nested builder as a keyword parameter so it can be exercised
in isolation.

Any SchemaError raised by a builder aborts the whole render.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from modulectl.domain.driver import Command, DataField, Driver
from modulectl.domain.errors import SchemaError

DRIVERS_LIST_LINK = "https://moduware.github.io/developer-documentation/module-drivers/"
LANGUAGE_TABS: tuple[str, ...] = ("javascript",)

VALUE_PLACEHOLDER = "{0}"
VALUE_TOKEN = "**value**"

_TABLE_RULE_2 = "-------------- | --------------"
_TABLE_RULE_3 = "-------------- | -------------- | --------------"
_TABLE_RULE_4 = "-------------- | -------------- | -------------- | --------------"

_DATA_RECEIVED_SNIPPET = """\

<aside class="warning">If you want to work with received data you need to listen for \
<code>DataReceived</code> event after Api is ready</aside>
> When Moduware API is ready start listening for received data

```javascript
document.addEventListener('WebViewApiReady', function() {
  Moduware.v0.API.Module.addEventListener('DataReceived', function(event) {
    // we don't care about data not related to our module
    if(event.moduleUuid != Moduware.Arguments.uuid) return;

    // ... handle specific received data here ...

  });
});
```

"""


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def render(
    driver: Driver,
    *,
    drivers_list_link: str = DRIVERS_LIST_LINK,
    language_tabs: Sequence[str] = LANGUAGE_TABS,
) -> str:
    """Render the full Markdown document for *driver*."""
    return (
        render_header(driver, drivers_list_link=drivers_list_link, language_tabs=language_tabs)
        + render_commands(driver)
        + render_data(driver)
    )


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------


def render_header(
    driver: Driver,
    *,
    drivers_list_link: str = DRIVERS_LIST_LINK,
    language_tabs: Sequence[str] = LANGUAGE_TABS,
) -> str:
    """Front matter plus the type/version heading block."""
    tabs = "".join(f"  - {tab}\n" for tab in language_tabs)
    return (
        "---\n"
        f"title: {driver.type} Driver\n"
        "\n"
        "language_tabs:\n"
        f"{tabs}"
        "\n"
        "toc_footers:\n"
        f"  - <a href='{drivers_list_link}'>Drivers list</a>\n"
        "\n"
        "search: true\n"
        "---\n"
        "\n"
        f"# Driver: {driver.type}\n"
        "\n"
        f"**Type**: {driver.type}\n"
        "\n"
        f"**Version**: {driver.version}\n"
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def format_validation(validation: str) -> str:
    """Replace every ``{0}`` placeholder with a bold ``value`` token."""
    return validation.replace(VALUE_PLACEHOLDER, VALUE_TOKEN)


def render_argument_list(command: Command) -> str:
    """Comma-joined ``<name>`` list used inside the SendCommand example."""
    if not command.arguments:
        return ""
    names = _argument_names(command)
    return ", ".join(f"<{name}>" for name in names)


def render_arguments(
    command: Command,
    *,
    format_validation: Callable[[str], str] = format_validation,
) -> str:
    """Arguments table for one command; empty when it takes none."""
    if not command.arguments:
        return ""
    names = _argument_names(command)
    lines = ["### Arguments", "Name | Description | Validation", _TABLE_RULE_3]
    for name, argument in zip(names, command.arguments, strict=True):
        validation = format_validation(argument.validation) if argument.validation else "none"
        lines.append(f"{name} | {argument.description or '-'} | {validation}")
    return "\n".join(lines) + "\n"


def render_commands(
    driver: Driver,
    *,
    render_arguments: Callable[[Command], str] = render_arguments,
) -> str:
    """Commands section; empty when the driver declares no commands."""
    if not driver.commands:
        return ""

    parts = ["# Commands\n"]
    for command in driver.commands:
        if command.name is None:
            raise SchemaError("name", "command")
        if command.command is None:
            raise SchemaError("command", f"command '{command.name}'")
        parts.append(
            f"\n## {command.display_name}\n"
            "\n"
            "```javascript\n"
            "Moduware.v0.API.Module.SendCommand(Moduware.Arguments.uuid, "
            f"'{command.name}', [{render_argument_list(command)}]);\n"
            "```\n"
            "\n"
            "Command Name | Message Type\n"
            f"{_TABLE_RULE_2}\n"
            f"{command.name} | {command.command}\n"
            "\n"
            f"{command.description or ''}\n"
        )
        parts.append(render_arguments(command))
    return "".join(parts)


def _argument_names(command: Command) -> list[str]:
    names: list[str] = []
    for argument in command.arguments or []:
        if argument.name is None:
            raise SchemaError("name", "argument", parent=f"command '{command.name}'")
        names.append(argument.name)
    return names


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------


def render_variable_examples(field: DataField) -> str:
    """One code example per variable: a value read or a state switch."""
    if not field.variables:
        return ""

    names = _variable_names(field)
    parts: list[str] = []
    for name, variable in zip(names, field.variables, strict=True):
        if variable.state is None:
            parts.append(f"\n```javascript\nconsole.log(event.variables.{name});\n```\n")
            continue
        cases = "".join(
            f"  case '{value}':\n  // ... handle the state here ...\n  break;\n"
            for value in dict.fromkeys(variable.state.values())
        )
        parts.append(f"\n```javascript\nswitch(event.variables.{name}) {{\n{cases}}}\n```\n")
    return "".join(parts)


def render_variables(
    field: DataField,
    *,
    render_examples: Callable[[DataField], str] = render_variable_examples,
) -> str:
    """Variables section for one data field; empty when it has none."""
    if not field.variables:
        return ""
    names = _variable_names(field)

    rows = []
    for name, variable in zip(names, field.variables, strict=True):
        states = "*" if variable.state is None else " / ".join(variable.state.values())
        title = variable.title or "-"
        description = variable.description or "-"
        rows.append(f"{name} | {title} | {description} | {states}\n")
    return (
        "### Variables\n"
        + render_examples(field)
        + "\nName | Title | Description | States\n"
        + f"{_TABLE_RULE_4}\n"
        + "".join(rows)
    )


def _variable_names(field: DataField) -> list[str]:
    names: list[str] = []
    for variable in field.variables or []:
        if variable.name is None:
            raise SchemaError("name", "variable", parent=f"data field '{field.name}'")
        names.append(variable.name)
    return names


def render_data(
    driver: Driver,
    *,
    render_variables: Callable[[DataField], str] = render_variables,
) -> str:
    """Data section; empty when the driver emits no data fields."""
    if not driver.data:
        return ""

    parts = ["# Data\n", _DATA_RECEIVED_SNIPPET]
    for field in driver.data:
        if field.name is None:
            raise SchemaError("name", "data field")
        if field.source is None:
            raise SchemaError("source", f"data field '{field.name}'")
        parts.append(
            f"\n## {field.display_name}\n"
            "\n"
            "```javascript\n"
            f"if(event.dataSource == '{field.name}') {{\n"
            "  // ... work with data variables here ...\n"
            "}\n"
            "```\n"
            "\n"
            "Data Name | Message Type\n"
            f"{_TABLE_RULE_2}\n"
            f"{field.name} | {field.source}\n"
            "\n"
            f"{field.description or ''}\n"
        )
        parts.append(render_variables(field))
    return "".join(parts)
