"""Entry point: ``python -m zombiesim``.

Supports two modes:
  - ``python -m zombiesim``          → Launch the FastAPI server
  - ``python -m zombiesim cli``      → Headless day-by-day simulation
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Zombie horde spread simulator")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--size", type=int, default=25, choices=[25, 26, 27])
    srv.add_argument("--save-file", type=str, default="saved_maps.json")
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Generate a map and simulate N days")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--size", type=int, default=25, choices=[25, 26, 27])
    cli.add_argument("--days", type=int, default=20)
    cli.add_argument("--governor", type=str, default="MyHordes", choices=["MyHordes", "Hordes"])
    cli.add_argument("--town-type", type=str, default="NORMAL", choices=["EASY", "NORMAL", "HARD"])
    cli.add_argument("--ruins", type=int, default=10)
    cli.add_argument("--save", type=str, default=None, help="Append the final map to this library file")
    cli.add_argument("--trace-spread", action="store_true", help="Log every spread cycle")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from zombiesim.api.app import create_app
    from zombiesim.config import SimulationConfig

    config = SimulationConfig(
        world_seed=args.seed,
        map_size=args.size,
        save_file=args.save_file,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from zombiesim.config import SimulationConfig
    from zombiesim.core.enums import Governor, TownType
    from zombiesim.core.simulation_state import SimulationState
    from zombiesim.systems.rng import RandomStream
    from zombiesim.utils.logging import setup_logging
    from zombiesim.utils.persistence import MapLibrary

    config = SimulationConfig(
        world_seed=args.seed,
        map_size=args.size,
        governor=Governor(args.governor),
        town_type=TownType(args.town_type),
        ruin_count=args.ruins,
        log_level=args.log_level,
    )
    setup_logging(config.log_level, trace_spread=args.trace_spread)

    rng = RandomStream(config.world_seed)
    state = SimulationState(config)
    state.regenerate(rng, config.origin_x, config.origin_y)
    logger.info("=== Simulation started (seed=%d, %d zombies) ===", config.world_seed, state.total_zombies())

    for _ in range(args.days):
        state.advance_day(rng)

    logger.info(
        "Done. Day %d: %d zombies (floor %.1f)",
        state.day, state.total_zombies(), state.minimum_threshold(),
    )
    if args.save:
        MapLibrary(args.save).save(state)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
