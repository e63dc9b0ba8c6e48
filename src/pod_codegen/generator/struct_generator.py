from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from pod_codegen.models import MemberVariable, RecordDefinition, indent

# Indent width of member declarations inside a struct body.
MEMBER_INDENT = 4


@lru_cache(maxsize=None)
def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
    )


def render_member(member: MemberVariable, indent_width: int) -> str:
    """Render one member declaration, preceded by its docstring line if any.

    Example (indent 4, documented, defaulted):
        "    /// Counter.\\n    uint32_t count = 0;\\n"
    """
    template = _get_template_env().get_template("member.h.j2")
    return template.render(
        docs=member.docs.render(indent_width),
        indent=indent(indent_width),
        dtype=member.dtype,
        name=member.name,
        default=member.default.render(),
    )


def render_record(record: RecordDefinition) -> str:
    """Render a full struct declaration followed by a blank line.

    The struct docstring sits above the `struct` keyword at column 0.
    Member blocks are indented by MEMBER_INDENT and separated by a blank
    line, in declaration order.
    """
    template = _get_template_env().get_template("struct.h.j2")
    return template.render(
        docs=record.docs.render(0),
        name=record.name,
        members=[render_member(m, MEMBER_INDENT) for m in record.members],
    )
