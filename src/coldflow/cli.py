import argparse
import logging
import sys
from functools import partial
from pathlib import Path
from typing import Any, Dict, List, Optional

from coldflow.core.config import ConfigError, compute_config_hash, load_config, resolve_settings
from coldflow.core.engine import activate
from coldflow.core.exceptions import ColdflowException, SinkFailure
from coldflow.core.pipeline import ActivationContext, ActivationState, build_from_settings

logger = logging.getLogger("coldflow.cli")

DEFAULTS_PATH = str(Path(__file__).resolve().parent / "defaults" / "config.defaults.yaml")
LOCAL_PATH = "config/config.local.yaml"

EXIT_OK = 0
EXIT_ERRORED = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="coldflow", description="coldflow CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Build and activate a pipeline, printing each value")
    run_parser.add_argument("--config", default=DEFAULTS_PATH, help="Defaults file (YAML or JSON)")
    run_parser.add_argument("--local", default=LOCAL_PATH, help="Optional local overrides file")
    run_parser.add_argument("--factor", type=float, help="Scale factor")
    run_parser.add_argument("--values", type=float, nargs="*", help="Input numbers")
    run_parser.add_argument("--pacing", choices=["immediate", "interval"], help="Pacing mode")
    run_parser.add_argument("--period", type=float, help="Seconds between ticks (interval pacing)")
    run_parser.add_argument("--delay", type=float, help="Seconds before the first tick (interval pacing)")
    run_parser.add_argument("--verbose", action="store_true", help="Log activation events")

    return parser


def _as_number(value: float) -> Any:
    return int(value) if float(value).is_integer() else value


def overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    pipeline: Dict[str, Any] = {}
    pacing: Dict[str, Any] = {}
    if args.factor is not None:
        pipeline["factor"] = _as_number(args.factor)
    if args.values is not None:
        pipeline["inputs"] = [_as_number(v) for v in args.values]
    if args.pacing is not None:
        pacing["mode"] = args.pacing
    if args.period is not None:
        pacing["period"] = args.period
    if args.delay is not None:
        pacing["delay"] = args.delay

    overrides: Dict[str, Any] = {}
    if pipeline:
        overrides["pipeline"] = pipeline
    if pacing:
        overrides["pacing"] = pacing
    return overrides


def _log_events(ctx: ActivationContext, verbose: bool) -> None:
    if verbose:
        for event in ctx.events:
            logger.info(f"[{event['stage']}] {event['message']}")


def handle_run(args: argparse.Namespace) -> int:
    try:
        config = load_config(
            defaults_path=args.config,
            local_path=args.local,
            overrides=overrides_from_args(args),
        )
        settings = resolve_settings(config)
        pipeline = build_from_settings(settings)
    except (ConfigError, ColdflowException) as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG

    ctx = ActivationContext.new(config=config, meta={"config_hash": compute_config_hash(config)})
    try:
        activation = activate(pipeline, partial(print, flush=True), ctx=ctx)
        state = activation.wait()
    except SinkFailure as e:
        _log_events(ctx, args.verbose)
        logger.error(f"Activation errored: {e}")
        return EXIT_ERRORED

    _log_events(ctx, args.verbose)

    if state is ActivationState.ERRORED:
        logger.error(f"Activation errored: {activation.error}")
        return EXIT_ERRORED
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    if args.command == "run":
        return handle_run(args)
    return EXIT_CONFIG


if __name__ == "__main__":
    sys.exit(main())
