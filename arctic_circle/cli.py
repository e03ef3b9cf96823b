"""CLI entrypoint for headless arctic-circle runs.

Resolves settings from ``--config`` JSON and command-line flags (CLI values
override file values, file values override built-in defaults), plays one
seeded simulation with :func:`arctic_circle.simulation.runner.run_simulation`
and prints a JSON summary.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from arctic_circle.config.constants import (
    DEFAULT_RANDOM_BIAS_COEF,
    DEFAULT_SIM_SPEED,
)
from arctic_circle.config.types import RunConfig
from arctic_circle.simulation.runner import run_simulation

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Setting resolution
# ---------------------------------------------------------------------------

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


def _to_bool(raw: object, key: str) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in _TRUE_STRINGS | _FALSE_STRINGS:
        return raw.strip().lower() in _TRUE_STRINGS
    raise ValueError(f"{key} must be a boolean value, got {raw!r}")


def _to_int(raw: object, key: str) -> int:
    """Whole numbers only; ``2.0`` is accepted, ``2.5`` and ``True`` are not."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    try:
        value = float(raw) if isinstance(raw, float) else int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    if value != int(value):
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    return int(value)


def _to_float(raw: object, key: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be a number, got {raw!r}")
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be a number, got {raw!r}") from exc
    if not math.isfinite(value):
        raise ValueError(f"{key} must be finite, got {raw!r}")
    return value


def _to_str(raw: object, key: str) -> str:
    if isinstance(raw, bool) or not isinstance(raw, (str, Path, int, float)):
        raise ValueError(f"{key} must be a string value, got {raw!r}")
    return str(raw)


class _Settings:
    """Looks each setting up on the command line, then the config file, then the default."""

    def __init__(self, args: argparse.Namespace, file_cfg: dict[str, object]) -> None:
        self._args = args
        self._file_cfg = file_cfg

    def get(self, key: str, default: T, coerce: Callable[[object, str], T]) -> T:
        raw = getattr(self._args, key)
        if raw is None:
            raw = self._file_cfg.get(key, default)
        return coerce(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Run a seeded domino-shuffling simulation of the Aztec diamond"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--bias",
        type=float,
        default=None,
        help="Probability of inserting a horizontal (left/right) tile pair",
    )
    parser.add_argument("--speed", type=float, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--snapshot",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write per-iteration tile snapshots to tile_log.parquet",
    )
    parser.add_argument("--log-level", type=str.upper, choices=_LOG_LEVELS, default=None)
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a single headless run.

    Supports ``--config path/to/config.json`` for reproducibility.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    settings = _Settings(args, file_cfg)
    try:
        log_level = settings.get("log_level", "WARNING", _to_str).upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        config = RunConfig(
            max_iterations=settings.get("iterations", 20, _to_int),
            random_seed=settings.get("seed", 0, _to_int),
            random_bias_coef=settings.get("bias", DEFAULT_RANDOM_BIAS_COEF, _to_float),
            speed=settings.get("speed", DEFAULT_SIM_SPEED, _to_float),
            out_dir=Path(settings.get("out_dir", "data", _to_str)),
            record_tiles=settings.get("snapshot", True, _to_bool),
        )
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = run_simulation(config)
    print(json.dumps(result.to_summary(), ensure_ascii=False, indent=2, allow_nan=False))


if __name__ == "__main__":
    main()
