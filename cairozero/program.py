"""Loading of compiled Cairo Zero programs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

from cairozero.felt import parse_felt


class ProgramLoadError(ValueError):
    """Raised when a compiled program cannot be loaded."""


@dataclass
class Program:
    """A loaded Cairo Zero program."""

    bytecode: list[int] = field(default_factory=list)
    entrypoints: dict[str, int] = field(default_factory=dict)
    labels: dict[str, int] = field(default_factory=dict)
    builtins: list[str] = field(default_factory=list)


def _identifiers_of_type(zero_program: Mapping[str, Any], kind: str) -> dict[str, int]:
    prefix_length = len(zero_program.get("main_scope", "")) + 1
    identifiers = zero_program.get("identifiers") or {}
    return {
        key[prefix_length:]: int(ident.get("pc", 0))
        for key, ident in identifiers.items()
        if ident.get("type") == kind
    }


def load_cairo_zero_program(zero_program: Mapping[str, Any]) -> Program:
    """Build a Program from a decoded compiled-program document."""
    bytecode = []
    for position, word in enumerate(zero_program.get("data") or []):
        try:
            bytecode.append(parse_felt(word))
        except (ValueError, TypeError, AttributeError) as exc:
            raise ProgramLoadError(
                f"cannot read bytecode {word} at position {position}: {exc}"
            ) from exc

    try:
        entrypoints = _identifiers_of_type(zero_program, "function")
    except (ValueError, TypeError, AttributeError) as exc:
        raise ProgramLoadError(f"extracting entrypoints: {exc}") from exc
    try:
        labels = _identifiers_of_type(zero_program, "label")
    except (ValueError, TypeError, AttributeError) as exc:
        raise ProgramLoadError(f"extracting labels: {exc}") from exc

    return Program(
        bytecode=bytecode,
        entrypoints=entrypoints,
        labels=labels,
        builtins=list(zero_program.get("builtins") or []),
    )


def load_cairo_zero_program_from_json(text: str | bytes) -> Program:
    """Parse compiled-program JSON and build a Program from it."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProgramLoadError(f"invalid program json: {exc}") from exc
    if not isinstance(document, dict):
        raise ProgramLoadError("program json must be an object")
    return load_cairo_zero_program(document)