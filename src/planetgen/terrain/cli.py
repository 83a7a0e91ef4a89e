"""Command-line interface for planet generation."""

import argparse
import logging
import sys
import time
from pathlib import Path

import structlog


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a procedural planet cross-section"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default="default",
        help="Config name or path to a TOML file (default: default)",
    )
    seed_group = parser.add_mutually_exclusive_group()
    seed_group.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed; re-derives radius, deformation and cave density from it",
    )
    seed_group.add_argument(
        "--random-seed", action="store_true", help="Draw a random seed"
    )
    for name in ("radius", "deformation", "deformation-frequency", "cave-density"):
        parser.add_argument(
            f"--{name}-ratio",
            type=float,
            default=None,
            help=f"Override {name.replace('-', ' ')} as a ratio of its range (0-1)",
        )
    parser.add_argument(
        "--workers", type=int, default=None, help="Worker threads (default: from config)"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Save the planet map and noise field to this .npz path",
    )
    parser.add_argument(
        "--image", type=str, default=None, help="Save the rendered planet as PNG"
    )
    parser.add_argument(
        "--noise-image", type=str, default=None, help="Save the noise field as PNG"
    )
    parser.add_argument(
        "--block-size", type=int, default=1, help="Pixels per cell in images (default: 1)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for planet generation.

    Returns:
        Process exit status.
    """
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from ..config import find_config, load_config
    from ..exceptions import PlanetError
    from ..planet import PlanetGenerator
    from .persistence import save_map
    from .render import build_color_table, render_noise, render_planet, save_image

    try:
        config = load_config(find_config(args.config))
    except (FileNotFoundError, PlanetError) as e:
        logger.error("config_load_failed", config=args.config, error=str(e))
        return 1

    generator = PlanetGenerator(config)
    start_time = time.time()
    try:
        if args.random_seed:
            generator.set_random_seed()
        elif args.seed is not None:
            generator.set_seed(args.seed)

        if args.radius_ratio is not None:
            generator.set_radius_ratio(args.radius_ratio)
        if args.deformation_ratio is not None:
            generator.set_deformation_ratio(args.deformation_ratio)
        if args.deformation_frequency_ratio is not None:
            generator.set_deformation_frequency_ratio(args.deformation_frequency_ratio)
        if args.cave_density_ratio is not None:
            generator.set_cave_density_ratio(args.cave_density_ratio)
        if args.workers is not None:
            generator.configure(workers=args.workers)

        result = generator.generate()
    except PlanetError as e:
        logger.error("generation_failed", seed=generator.seed, error=str(e))
        return 1
    gen_time = time.time() - start_time

    print(f"Seed: {generator.seed}")
    print(f"Map size: {result.map_size}x{result.map_size}")
    print(f"Generation complete in {gen_time:.2f}s")

    if args.output:
        save_map(Path(args.output), result)
        print(f"Saved map to {args.output}")

    if args.image:
        table = build_color_table(result.config.elements, result.config.background_color)
        save_image(Path(args.image), render_planet(result.planet_map, table, args.block_size))
        print(f"Saved image to {args.image}")

    if args.noise_image:
        save_image(Path(args.noise_image), render_noise(result.noise_field, args.block_size))
        print(f"Saved noise image to {args.noise_image}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
