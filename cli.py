"""
cli.py - Command Line Entry Point
==================================
    graph-animator ALGORITHM GRAPH_CONFIG_FILE OUTPUT_FILE

Runs one algorithm over a graph config file and writes the animation as
a looping GIF.  Exit status is 0 on success and 1 on any error.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from algorithms import REGISTRY, MaxFlowAlgorithm, create_algorithm, get_algorithm
from engine import Visualizer
from graph import VisualizerError, load_config_file
from ui import GIFRenderer

logger = logging.getLogger("graph_animator")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-animator",
        description="Animate a graph algorithm step by step into a GIF.",
    )
    parser.add_argument("algorithm", metavar="ALGORITHM",
                        help=f"one of: {', '.join(REGISTRY)}")
    parser.add_argument("config_file", metavar="GRAPH_CONFIG_FILE",
                        help="sectioned graph config text file")
    parser.add_argument("output_file", metavar="OUTPUT_FILE",
                        help="GIF file to write")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true",
                           help="log every step")
    verbosity.add_argument("-q", "--quiet", action="store_true",
                           help="only log errors")
    return parser


def run(algorithm_key: str, config_file: str, output_file: str) -> int:
    info = get_algorithm(algorithm_key)
    if info is None:
        logger.error("Error: unknown algorithm %r (choose from %s)",
                     algorithm_key, ", ".join(REGISTRY))
        return 1

    output = Path(output_file)
    if output.suffix.lower() != ".gif":
        logger.error("Error: output file must end in .gif, got %r", output_file)
        return 1

    try:
        config    = load_config_file(config_file, info.config_kind)
        algorithm = create_algorithm(info.key, config)
        renderer  = GIFRenderer(output, config.frame_delay, config.frame_width, config.frame_height)
        frames    = Visualizer(algorithm, renderer).visualize()
    except (VisualizerError, OSError) as e:
        logger.error("Error: %s", e)
        return 1

    logger.info("%s: %d frame(s) written to %s", info.label, frames, output)
    if isinstance(algorithm, MaxFlowAlgorithm):
        logger.info("maximum flow: %d", algorithm.max_flow)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    return run(args.algorithm, args.config_file, args.output_file)


if __name__ == "__main__":
    sys.exit(main())
