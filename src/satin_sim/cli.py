from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from satin_sim.models import RunConfig
from satin_sim.runner import run

logger = logging.getLogger("satin_sim")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="satin-sim",
        description="Predict CO2 laser output power with a saturated Gaussian-beam model",
    )
    parser.add_argument(
        "--concurrent",
        "-concurrent",
        action="store_true",
        help="Process lasers concurrently instead of one after another.",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML run config")
    parser.add_argument(
        "--data-dir", type=Path, help="Directory containing laser.dat and pin.dat"
    )
    parser.add_argument("--out", type=Path, help="Output directory for report files")
    parser.add_argument("--max-workers", type=int, help="Worker pool size in concurrent mode")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default from config, else INFO)",
    )
    return parser.parse_args(argv)


def _load_config(path: Path | None) -> RunConfig:
    if path is None:
        return RunConfig()
    with path.open("r", encoding="utf-8") as fh:
        payload = yaml.safe_load(fh) or {}
    if not isinstance(payload, dict):
        msg = "Config file root must be a mapping/object."
        raise ValueError(msg)
    return RunConfig.model_validate(payload)


def _apply_overrides(cfg: RunConfig, args: argparse.Namespace) -> RunConfig:
    updates: dict[str, Any] = {}
    if args.data_dir is not None:
        updates["data_dir"] = args.data_dir
    if args.out is not None:
        updates["output_dir"] = args.out
    if args.log_level is not None:
        updates["log_level"] = args.log_level

    execution = cfg.execution.model_dump()
    if args.concurrent:
        execution["mode"] = "concurrent"
    if args.max_workers is not None:
        execution["max_workers"] = args.max_workers
    updates["execution"] = execution

    return RunConfig.model_validate({**cfg.model_dump(), **updates})


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level or logging.INFO, format=LOG_FORMAT)

    start = time.perf_counter()
    try:
        cfg = _apply_overrides(_load_config(args.config), args)
        logging.getLogger().setLevel(cfg.log_level)
        run(cfg)
    except Exception as exc:
        logger.error("Failed to complete: %s", exc)
        return 1
    finally:
        logger.info("The time was %.3f seconds", time.perf_counter() - start)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
