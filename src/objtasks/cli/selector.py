"""CLI command: objtasks selector -- build a compound selector from parts."""

from __future__ import annotations

import sys

import click

from objtasks.selector import SelectorError, css_selector_builder

_WRITERS = {
    "element": "with_element",
    "id": "with_id",
    "class": "with_class",
    "attr": "with_attribute",
    "pseudo-class": "with_pseudo_class",
    "pseudo-element": "with_pseudo_element",
}


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a CSS selector from KIND=VALUE parts, applied in the given order.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.

    Example: objtasks selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    builder = css_selector_builder
    for part in parts:
        kind, sep, value = part.partition("=")
        if not sep or kind not in _WRITERS:
            raise click.BadParameter(
                f"{part!r} is not KIND=VALUE with KIND in {', '.join(_WRITERS)}",
                param_hint="PARTS",
            )
        try:
            builder = getattr(builder, _WRITERS[kind])(value)
        except SelectorError as exc:
            click.echo(f"Selector error: {exc}", err=True)
            sys.exit(1)

    click.echo(builder.stringify())
