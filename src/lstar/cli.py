"""Command-line interface for lstar."""

import json
import logging
import sys

import click

from . import __version__
from .color_types import RGBAColor
from .color_utils import format_color, parse_color
from .colors import is_dark, is_light, perceived_lightness, relative_luminance_of
from .contrast import find_optimal_contrasting_color
from .contrast_cache import ContrastPairCache
from .lightness import adjust_perceived_lightness, with_perceived_lightness

format_option = click.option(
    "-f",
    "--format",
    "format_type",
    type=click.Choice(["hex", "rgb", "raw"], case_sensitive=False),
    default="hex",
    help="Output format for colors (default: hex)",
)


@click.group()
@click.version_option(version=__version__, prog_name="lstar")
@click.option("-v", "--verbose", is_flag=True, help="Log search details to stderr")
def main(verbose: bool) -> None:
    """Measure and retarget perceived lightness (CIE L*) of colors.

    Colors are given as #RRGGBB, #RRGGBBAA, rgb(R,G,B), rgba(R,G,B,A),
    hsl(H,S%,L%) or hsv(H,S%,V%).

    Examples:

        lstar lightness "#808080"

        lstar set "#ff0000" -l 75

        lstar adjust "rgb(0, 128, 255)" -d -20 --format rgb

        lstar contrast "#faf4ed"

        lstar contrast "#ffffff" "#ff0000" "#00ff00" "#0000ff"
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("color")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object")
def lightness(color: str, as_json: bool) -> None:
    """Print relative luminance and perceived lightness of COLOR."""
    try:
        parsed = parse_color(color)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    luminance = relative_luminance_of(parsed)
    value = perceived_lightness(luminance)
    if is_light(value):
        tone = "light"
    elif is_dark(value):
        tone = "dark"
    else:
        tone = "middle"

    if as_json:
        click.echo(
            json.dumps({"luminance": luminance, "lightness": value, "tone": tone}, indent=2)
        )
    else:
        click.echo(f"Luminance: {luminance:.6f}")
        click.echo(f"Lightness: {value:.4f}")
        click.echo(f"Tone:      {tone}")


@main.command("set")
@click.argument("color")
@click.option(
    "-l",
    "--lightness",
    "target",
    type=float,
    required=True,
    help="Target perceived lightness, 0 (black) to 100 (white); clamped",
)
@format_option
def set_lightness(color: str, target: float, format_type: str) -> None:
    """Print COLOR with its perceived lightness set to a target."""
    try:
        adjusted = with_perceived_lightness(parse_color(color), target)
        click.echo(format_color(adjusted, format_type.lower()))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("color")
@click.option(
    "-d",
    "--delta",
    type=float,
    required=True,
    help="Lightness change on the L* scale, -100 to 100; clamped",
)
@format_option
def adjust(color: str, delta: float, format_type: str) -> None:
    """Print COLOR with its perceived lightness shifted by a delta."""
    try:
        adjusted = adjust_perceived_lightness(parse_color(color), delta)
        click.echo(format_color(adjusted, format_type.lower()))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("base")
@click.argument("candidates", nargs=-1)
@click.option("--dark", default="#000000", help="Dark reference color (default: black)")
@click.option("--light", default="#FFFFFF", help="Light reference color (default: white)")
@format_option
def contrast(
    base: str, candidates: tuple[str, ...], dark: str, light: str, format_type: str
) -> None:
    """Print the color contrasting most with BASE.

    Chooses among CANDIDATES when given, otherwise between the dark and light
    reference colors.
    """
    try:
        base_color = parse_color(base)
        options: list[RGBAColor] = [parse_color(c) for c in candidates]
        cache = ContrastPairCache(parse_color(dark), parse_color(light))

        result = find_optimal_contrasting_color(
            base_color, options, cache, base_color.perceived_lightness
        )
        click.echo(format_color(result, format_type.lower()))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
