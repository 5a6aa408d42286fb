"""CLI command: selector-builder build -- assemble a selector from parts."""

from __future__ import annotations

import sys

import click

from selector_builder.builder import SelectorBuilder, Stringifiable, css_selector_builder
from selector_builder.config import BuilderConfig
from selector_builder.errors import SelectorError

# Part kinds accepted on the command line, mapped to builder method names.
_PART_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

# Word aliases for tokens that are awkward to pass through a shell.
_COMBINATOR_ALIASES: dict[str, str] = {
    "descendant": " ",
    "child": ">",
}


def _split_compounds(
    parts: tuple[str, ...],
) -> tuple[list[list[tuple[str, str]]], list[str]]:
    """Split PART arguments into compound selectors and the tokens between them."""
    compounds: list[list[tuple[str, str]]] = [[]]
    tokens: list[str] = []
    for raw in parts:
        if "=" in raw:
            kind, value = raw.split("=", 1)
            if kind not in _PART_METHODS:
                raise click.BadParameter(
                    f"unknown part kind {kind!r}; expected one of "
                    f"{', '.join(_PART_METHODS)}",
                    param_hint="PART",
                )
            compounds[-1].append((kind, value))
            continue
        if not compounds[-1]:
            raise click.UsageError(f"Combinator {raw!r} must follow a selector part")
        tokens.append(_COMBINATOR_ALIASES.get(raw, raw))
        compounds.append([])
    if not compounds[-1]:
        raise click.UsageError("Selector must end with a selector part")
    return compounds, tokens


def _apply(builder: SelectorBuilder, compound: list[tuple[str, str]]) -> SelectorBuilder:
    for kind, value in compound:
        builder = getattr(builder, _PART_METHODS[kind])(value)
    return builder


@click.command()
@click.argument("parts", nargs=-1, required=True, metavar="PART...")
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Only accept the combinators ' ', '+', '~' and '>'",
)
def build(parts: tuple[str, ...], strict: bool) -> None:
    """Build a CSS selector from PART arguments, applied in order.

    Each PART is KIND=VALUE, where KIND is element, id, class, attr,
    pseudo-class or pseudo-element. A bare token (+, ~, >, child or
    descendant) starts the next compound selector.

    Exits with code 1 if the parts break selector ordering or uniqueness.
    """
    compounds, tokens = _split_compounds(parts)
    root = css_selector_builder.with_config(BuilderConfig(strict_combinators=strict))

    try:
        selectors: list[Stringifiable] = [_apply(root, c) for c in compounds]
        result = selectors[-1]
        for left, token in zip(reversed(selectors[:-1]), reversed(tokens)):
            result = root.combine(left, token, result)
    except SelectorError as exc:
        click.echo(f"Error [{exc.kind.value}]: {exc}", err=True)
        sys.exit(1)

    click.echo(result.stringify())
