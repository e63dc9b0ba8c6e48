from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


class ModelError(ValueError):
    """Raised when a struct description cannot be represented."""


def indent(width: int) -> str:
    """Return `width` space characters."""
    if width < 0:
        raise ModelError(f"Indent width must be non-negative, got {width}")
    return " " * width


@dataclass(frozen=True)
class DefaultValue:
    """Optional initializer expression, emitted verbatim after the member name."""

    expression: Optional[str] = None

    @classmethod
    def absent(cls) -> DefaultValue:
        return cls()

    @classmethod
    def present(cls, expression: str) -> DefaultValue:
        if expression is None:
            raise ModelError("DefaultValue.present() needs an expression; use absent()")
        return cls(expression)

    @property
    def is_present(self) -> bool:
        return self.expression is not None

    def render(self) -> str:
        if self.expression is None:
            return ""
        return f" = {self.expression}"

    serialize = render


@dataclass(frozen=True)
class Docstring:
    """A single-line `///` comment attached to a struct or a member."""

    text: Optional[str] = None

    def __post_init__(self):
        if self.text is not None and ("\n" in self.text or "\r" in self.text):
            raise ModelError(
                f"Docstring must be a single line, got {self.text!r}"
            )

    @classmethod
    def absent(cls) -> Docstring:
        return cls()

    @classmethod
    def one_line(cls, text: str) -> Docstring:
        if text is None:
            raise ModelError("Docstring.one_line() needs text; use absent()")
        return cls(text)

    @property
    def is_present(self) -> bool:
        return self.text is not None

    def render(self, indent_width: int) -> str:
        if self.text is None:
            return ""
        return f"{indent(indent_width)}/// {self.text}\n"

    serialize = render


@dataclass(frozen=True)
class MemberVariable:
    dtype: str
    name: str
    docs: Docstring = field(default_factory=Docstring)
    default: DefaultValue = field(default_factory=DefaultValue)

    def render(self, indent_width: int) -> str:
        from pod_codegen.generator.struct_generator import render_member

        return render_member(self, indent_width)

    serialize = render


@dataclass(frozen=True)
class RecordDefinition:
    """A plain old struct: a name, its members in declaration order, and docs."""

    name: str
    members: Tuple[MemberVariable, ...] = ()
    docs: Docstring = field(default_factory=Docstring)

    def __post_init__(self):
        # Accept any sequence but keep the stored value immutable.
        if not isinstance(self.members, tuple):
            object.__setattr__(self, "members", tuple(self.members))

    def render(self) -> str:
        from pod_codegen.generator.struct_generator import render_record

        return render_record(self)

    serialize = render
