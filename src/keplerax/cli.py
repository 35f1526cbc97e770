"""Command line front-end for keplerax.

Usage:
    keplerax elements --r 0 405400000 0 --v 1090 0 0
    keplerax state --a 502989447.71 --e 0.194 --i 3.14159 --t 3600
    keplerax force --p1 200 0 0 --p2 0 0 0 --m1 2e6 --m2 8e6

Masses default to the Earth (primary) and the Moon (secondary).  Pass
``--m2 0`` for an on-rails primary body.
"""

import logging
from typing import Annotated, Tuple

import jax.numpy as jnp
import typer

from keplerax.constants import MASS_EARTH, MASS_MOON
from keplerax.coordinates import orbital_elements, state_vectors
from keplerax.orbit_dynamics import force as gravity_force
from keplerax.orbits import apoapsis, periapsis, period
from keplerax.vec3 import magnitude

logger = logging.getLogger(__name__)

app = typer.Typer(help="Two-body orbital mechanics from the command line.", no_args_is_help=True)

Vector = Tuple[float, float, float]

PrimaryMass = Annotated[float, typer.Option(help="Mass of the primary body [kg]")]
SecondaryMass = Annotated[float, typer.Option(help="Mass of the secondary body [kg], 0 for an on-rails primary")]
Degrees = Annotated[bool, typer.Option("--degrees", help="Angles in degrees instead of radians")]


def _fmt_vec(x) -> str:
    return " ".join(f"{float(c):.6f}" for c in x)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def elements(
    r: Annotated[Vector, typer.Option(help="Position relative to the primary body [m]")],
    v: Annotated[Vector, typer.Option(help="Velocity relative to the primary body [m/s]")],
    m1: PrimaryMass = MASS_EARTH,
    m2: SecondaryMass = MASS_MOON,
    degrees: Degrees = False,
) -> None:
    """Print the orbital elements of a state vector."""
    if m1 + m2 <= 0.0:
        raise typer.BadParameter("m1 + m2 must be positive", param_hint="--m1/--m2")
    logger.debug("Computing orbital elements for r=%s v=%s m1=%g m2=%g", r, v, m1, m2)

    oe = orbital_elements(jnp.array(r), jnp.array(v), m1, m2, use_degrees=degrees)
    unit = "deg" if degrees else "rad"

    typer.echo(f"a: {float(oe.a):.6f} m")
    typer.echo(f"e: {float(oe.e):.6f}")
    typer.echo(f"w: {float(oe.w):.6f} {unit}")
    typer.echo(f"lan: {float(oe.lan):.6f} {unit}")
    typer.echo(f"i: {float(oe.i):.6f} {unit}")
    typer.echo(f"m: {float(oe.m):.6f} {unit}")
    typer.echo(f"period: {float(period(oe.a, m1, m2)):.6f} s")
    typer.echo(f"periapsis: {float(periapsis(oe.a, oe.e)):.6f} m")
    typer.echo(f"apoapsis: {float(apoapsis(oe.a, oe.e)):.6f} m")


@app.command()
def state(
    a: Annotated[float, typer.Option(help="Semi-major axis [m]")],
    e: Annotated[float, typer.Option(help="Eccentricity, 0 <= e < 1")],
    w: Annotated[float, typer.Option(help="Argument of periapsis")] = 0.0,
    lan: Annotated[float, typer.Option(help="Longitude of the ascending node")] = 0.0,
    i: Annotated[float, typer.Option(help="Inclination")] = 0.0,
    m0: Annotated[float, typer.Option(help="Mean anomaly at epoch")] = 0.0,
    t: Annotated[float, typer.Option(help="Time since epoch [s]")] = 0.0,
    m1: PrimaryMass = MASS_EARTH,
    m2: SecondaryMass = MASS_MOON,
    degrees: Degrees = False,
) -> None:
    """Print the state vectors of an orbit at t seconds after epoch."""
    if a <= 0.0:
        raise typer.BadParameter("only elliptical orbits (a > 0) can be propagated", param_hint="--a")
    if not 0.0 <= e < 1.0:
        raise typer.BadParameter("eccentricity must satisfy 0 <= e < 1", param_hint="--e")
    logger.debug("Computing state vectors for a=%g e=%g t=%g", a, e, t)

    sv = state_vectors(a, e, w, lan, i, m0, t, m1, m2, use_degrees=degrees)
    if not bool(jnp.all(jnp.isfinite(sv.r))):
        logger.warning("Kepler's equation did not converge for e=%g", e)

    typer.echo(f"r: {_fmt_vec(sv.r)} m")
    typer.echo(f"v: {_fmt_vec(sv.v)} m/s")


@app.command()
def force(
    p1: Annotated[Vector, typer.Option(help="Position of the primary body [m]")],
    p2: Annotated[Vector, typer.Option(help="Position of the secondary body [m]")],
    m1: PrimaryMass = MASS_EARTH,
    m2: SecondaryMass = MASS_MOON,
) -> None:
    """Print the gravitational force on the body at p1, pulling it toward p2."""
    if p1 == p2:
        raise typer.BadParameter("bodies must not be coincident", param_hint="--p1/--p2")
    logger.debug("Computing force between p1=%s p2=%s", p1, p2)

    f = gravity_force(jnp.array(p1), jnp.array(p2), m1, m2)

    typer.echo(f"force: {_fmt_vec(f)} N")
    typer.echo(f"magnitude: {float(magnitude(f)):.6f} N")


if __name__ == "__main__":
    app()
