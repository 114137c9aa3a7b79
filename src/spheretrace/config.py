"""
Command-line configuration for a render.

``-h`` selects the image height, so help is only available as ``--help``.
"""
import argparse
import os
from dataclasses import dataclass, field
from typing import List, Optional

MAX_U16 = 65535
MAX_U32 = 2**32 - 1


class ConfigError(ValueError):
    """Invalid or missing render configuration."""


@dataclass
class RenderConfig:
    width: int = 1920
    height: int = 1080
    samples: int = 64
    max_depth: int = 32
    output: str = ""
    seed: Optional[int] = None
    workers: int = field(default_factory=lambda: os.cpu_count() or 1)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def validate(self) -> "RenderConfig":
        if not 1 <= self.width <= MAX_U32:
            raise ConfigError(f"invalid width: {self.width}")
        if not 1 <= self.height <= MAX_U32:
            raise ConfigError(f"invalid height: {self.height}")
        if not 1 <= self.samples <= MAX_U16:
            raise ConfigError(f"invalid number of samples: {self.samples}")
        if not 0 <= self.max_depth <= MAX_U16:
            raise ConfigError(f"invalid maximum depth: {self.max_depth}")
        if self.workers < 1:
            raise ConfigError(f"invalid number of workers: {self.workers}")
        if self.seed is not None and self.seed < 0:
            raise ConfigError(f"invalid seed: {self.seed}")
        if not self.output:
            raise ConfigError("no output file specified")
        return self


class _ArgumentParser(argparse.ArgumentParser):
    # Report problems to the caller instead of exiting the interpreter.
    def error(self, message):
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    defaults = RenderConfig()
    parser = _ArgumentParser(
        prog="spheretrace",
        description="Render a scene of spheres to an image file.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-w", "--width", type=int, default=defaults.width,
                        help=f"image width in pixels (default {defaults.width})")
    parser.add_argument("-h", "--height", type=int, default=defaults.height,
                        help=f"image height in pixels (default {defaults.height})")
    parser.add_argument("-s", "--samples", type=int, default=defaults.samples,
                        help=f"samples per pixel (default {defaults.samples})")
    parser.add_argument("-d", "--max-depth", type=int, default=defaults.max_depth,
                        help=f"maximum ray bounces (default {defaults.max_depth})")
    parser.add_argument("-j", "--workers", type=int, default=defaults.workers,
                        help="worker processes (default: one per CPU)")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for a reproducible render")
    parser.add_argument("output", nargs="?", default="",
                        help="output file (.ppm, or .png/.jpg/.bmp/.tif via Pillow)")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> RenderConfig:
    args = build_parser().parse_args(argv)
    return RenderConfig(
        width=args.width,
        height=args.height,
        samples=args.samples,
        max_depth=args.max_depth,
        output=args.output,
        seed=args.seed,
        workers=args.workers,
    ).validate()
