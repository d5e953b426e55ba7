"""CLI for entropic."""

from __future__ import annotations

import base64
import itertools
import logging
import sys
import time

import click

from entropic import __version__


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log entropy fallbacks and reseeding.")
def main(verbose: bool) -> None:
    """entropic: pluggable bit sources and bias-free sampling."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _make_rng(seed: int | None):
    from entropic import StdRng

    if seed is None:
        return StdRng.from_entropy()
    return StdRng.seed_from_u64(seed)


# ────────────────────────────────────────────────────────────
# Entropy sources
# ────────────────────────────────────────────────────────────


@main.command()
def scan() -> None:
    """List the entropy sources available on this machine."""
    from entropic.platform import detect_available_sources, platform_info

    info = platform_info()
    click.echo(
        f"Platform: {info['system']} {info['machine']} "
        f"({info['byteorder']}-endian, Python {info['python']})"
    )
    click.echo()

    sources = detect_available_sources()
    click.echo(f"Found {len(sources)} available entropy source(s):\n")
    for src in sources:
        click.echo(f"  ✅ {src.name:<15} {src.description}")
    if not sources:
        click.echo("  (none found)")


@main.command()
@click.argument("source_name")
@click.option("--samples", default=4096, show_default=True, help="Bytes to draw from the source.")
def probe(source_name: str, samples: int) -> None:
    """Draw bytes from one source and show quality stats."""
    from entropic.errors import RandError
    from entropic.platform import detect_available_sources
    from entropic.stats import quality_report

    matches = [s for s in detect_available_sources() if source_name in s.name]
    if not matches:
        click.echo(f"Source '{source_name}' not found. Run 'scan' to list sources.")
        sys.exit(1)

    src = matches[0]
    click.echo(f"Probing: {src.name}")
    click.echo(f"  {src.description}")
    click.echo()

    t0 = time.monotonic()
    try:
        data = src.read(samples)
    except RandError as err:
        click.echo(f"  Source failed: {err}", err=True)
        sys.exit(1)
    elapsed = time.monotonic() - t0
    q = quality_report(data, src.name)

    click.echo(f"  Grade:           {q['grade']}")
    click.echo(f"  Samples:         {q['samples']:,}")
    click.echo(f"  Shannon entropy: {q.get('shannon_entropy', 0):.4f} / 8.0 bits")
    click.echo(f"  Min-entropy:     {q.get('min_entropy', 0):.4f}")
    click.echo(f"  Compression:     {q.get('compression_ratio', 0):.4f}")
    click.echo(f"  Time:            {elapsed:.3f}s")


# ────────────────────────────────────────────────────────────
# Sampling
# ────────────────────────────────────────────────────────────


@main.command()
@click.argument("low")
@click.argument("high")
@click.option("--count", "-n", default=1, show_default=True, help="Number of values.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.option("--float", "as_float", is_flag=True, help="Sample floats instead of integers.")
def sample(low: str, high: str, count: int, seed: int | None, as_float: bool) -> None:
    """Print COUNT values drawn uniformly from [LOW, HIGH).

    Examples:

        entropic sample 1 7 --count 10

        entropic sample 0 1 --float --seed 101
    """
    from entropic.distributions import Uniform
    from entropic.errors import InvalidRangeError

    parse = float if as_float else int
    try:
        bounds = parse(low), parse(high)
    except ValueError:
        if as_float:
            raise click.BadParameter("numeric bounds required") from None
        raise click.BadParameter("integer bounds required (use --float for real ranges)") from None
    try:
        distr = Uniform(*bounds)
    except InvalidRangeError as err:
        raise click.BadParameter(str(err)) from err

    rng = _make_rng(seed)
    for value in itertools.islice(rng.sample_iter(distr), max(count, 0)):
        click.echo(value)


@main.command("bytes")
@click.argument("n_bytes", type=int)
@click.option("--format", "fmt", type=click.Choice(["hex", "base64"]), default="hex",
              show_default=True, help="Output format.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
def bytes_(n_bytes: int, fmt: str, seed: int | None) -> None:
    """Print N_BYTES random bytes."""
    if n_bytes < 0:
        raise click.BadParameter("must be non-negative", param_hint="N_BYTES")
    buf = bytearray(n_bytes)
    _make_rng(seed).fill(buf)
    if fmt == "hex":
        click.echo(buf.hex())
    else:
        click.echo(base64.b64encode(bytes(buf)).decode())


if __name__ == "__main__":
    main()
