"""CLI for campus-nav."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from campus_nav import __version__
from campus_nav.parser import load_campus_file
from campus_nav.parser.model import CampusMap, PoiKind, PointOfInterest, RoutePath
from campus_nav.render import render_svg
from campus_nav.routing import (
    RoutingSettings,
    build_road_network,
    compute_route,
    directions_for,
)
from campus_nav.routing.constants import FALLBACK_MODES
from campus_nav.search import find_poi, primary_gate
from campus_nav.themes import THEMES
from campus_nav.viewport import IDENTITY, ViewportSettings, fit_transform


def _load(input_file: Path) -> CampusMap:
    try:
        return load_campus_file(input_file)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def _resolve_stops(campus: CampusMap, names: tuple[str, ...]) -> list[PointOfInterest]:
    """Look up stop names; a single stop is routed from the main gate."""
    stops = []
    for name in names:
        poi = find_poi(campus.pois, name)
        if poi is None:
            click.echo(f"Error: no point of interest matches '{name}'", err=True)
            raise SystemExit(1)
        stops.append(poi)

    if len(stops) == 1:
        gate = primary_gate(campus.pois)
        if gate is not None and gate.id != stops[0].id:
            stops.insert(0, gate)
    return stops


def _write_svg(path: Path, svg: str) -> None:
    path.write_text(svg if svg.endswith("\n") else svg + "\n")


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", count=True, help="Increase log output (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """campus-nav: Route between campus points of interest and render campus maps."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.argument("stops", nargs=-1, required=True)
@click.option("--fallback", type=click.Choice(list(FALLBACK_MODES)), default="direct",
              help="Path shape when the roads cannot connect two stops (default: direct)")
@click.option("--svg", "svg_path", type=click.Path(path_type=Path), default=None,
              help="Also render the route to this SVG file")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="campus",
              help="Visual theme for --svg (default: campus)")
def route(
    input_file: Path,
    stops: tuple[str, ...],
    fallback: str,
    svg_path: Path | None,
    theme: str,
) -> None:
    """Print walking directions through STOPS (names of points of interest)."""
    campus = _load(input_file)
    pois = _resolve_stops(campus, stops)
    settings = RoutingSettings(fallback=fallback)

    network = build_road_network(campus.config, settings=settings)
    path = compute_route(network, pois, settings)
    directions = directions_for(path, settings)

    click.echo(" -> ".join(p.name or p.id for p in pois))
    if directions:
        for i, line in enumerate(directions, 1):
            click.echo(f"{i}. {line}")
    else:
        for i, p in enumerate(pois, 1):
            verb = "Start at" if i == 1 else "Arrive at"
            click.echo(f"{i}. {verb} {p.name or p.id}")
    click.echo(f"Total: {path.length:.0f} {settings.unit} over {len(path)} points")

    if svg_path is not None:
        points = [p.position for p in pois] + list(path.points)
        transform = fit_transform(points, campus.config, ViewportSettings())
        _write_svg(svg_path, render_svg(campus, THEMES[theme], route=path, transform=transform))
        click.echo(f"Rendered route -> {svg_path}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="campus",
              help="Visual theme (default: campus)")
@click.option("--fit/--no-fit", default=True,
              help="Frame all points of interest (default) or draw at scale 1")
@click.option("--stop", "stops", multiple=True,
              help="Route through this point of interest (repeatable)")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    fit: bool,
    stops: tuple[str, ...],
) -> None:
    """Render a campus map to SVG."""
    campus = _load(input_file)

    path: RoutePath | None = None
    if stops:
        network = build_road_network(campus.config)
        path = compute_route(network, _resolve_stops(campus, stops))

    transform = IDENTITY
    if fit:
        transform = fit_transform(
            [p.position for p in campus.pois], campus.config, ViewportSettings()
        )

    svg = render_svg(campus, THEMES[theme], route=path, transform=transform)
    if output is None:
        output = input_file.with_suffix(".svg")
    _write_svg(output, svg)
    click.echo(f"Rendered {len(campus.pois)} points of interest at scale "
               f"{transform.scale:.2f} -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a campus map definition."""
    campus = _load(input_file)
    config = campus.config
    errors = []

    seen: set[str] = set()
    for poi in campus.pois:
        if poi.id in seen:
            errors.append(f"Duplicate id '{poi.id}'")
        seen.add(poi.id)
        if not (0 <= poi.x <= config.width and 0 <= poi.y <= config.height):
            errors.append(f"'{poi.name or poi.id}' at ({poi.x:g}, {poi.y:g}) lies "
                          f"outside the {config.width:g}x{config.height:g} map")
        if "unknown_kind" in poi.extra:
            errors.append(f"'{poi.name or poi.id}' has unknown kind "
                          f"'{poi.extra['unknown_kind']}'")

    gates = campus.pois_of_kind(PoiKind.GATE)
    if sum(1 for g in gates if g.is_main_gate) > 1:
        errors.append("More than one gate is marked as main gate")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(campus.pois)} points of interest, {len(gates)} gates")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a campus map definition."""
    campus = _load(input_file)
    config = campus.config
    network = build_road_network(config)

    click.echo(f"Title: {campus.title or '(none)'}")
    click.echo(f"Map: {config.width:g} x {config.height:g} "
               f"(viewport {config.viewport_width:g} x {config.viewport_height:g})")
    click.echo(f"Points of interest: {len(campus.pois)}")
    for kind in PoiKind:
        members = campus.pois_of_kind(kind)
        if members:
            click.echo(f"  {kind.value}: {len(members)}")
    gate = primary_gate(campus.pois)
    click.echo(f"Main gate: {gate.name if gate else '(none)'}")
    click.echo(f"Road network: {len(network)} nodes, "
               f"{network.graph.number_of_edges()} edges")
