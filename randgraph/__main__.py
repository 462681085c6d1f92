import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

from randgraph import (
    GraphConfig,
    GraphKind,
    InvalidConfiguration,
    Layout,
    Partition,
    config_for_kind,
    generate_graph,
    graph_to_dict,
    print_graph,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a random graph and print it")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in GraphKind],
        help="Start from a named graph preset; other flags override it",
    )
    parser.add_argument("--size", type=int, help="Number of nodes (default: 5)")
    parser.add_argument("--parts", type=int, help="Number of parts (default: 1)")
    parser.add_argument("--layout", choices=[layout.value for layout in Layout], help="Node layout")
    parser.add_argument(
        "--partition",
        choices=[partition.value for partition in Partition],
        help="How nodes are assigned to parts when --parts > 1",
    )
    parser.add_argument(
        "--directed",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate directed edges",
    )
    parser.add_argument(
        "--complete",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Keep every candidate edge",
    )
    parser.add_argument("--order", type=int, help="Number of edges for random selection")
    parser.add_argument(
        "--near",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use nearest-neighbour selection instead of uniform random selection",
    )
    parser.add_argument("--min-degree", type=int, help="Minimum per-node draw for nearest-neighbour selection")
    parser.add_argument("--width", type=float, help="Canvas width")
    parser.add_argument("--height", type=float, help="Canvas height")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


_FLAG_FIELDS = {
    "size": "total_size",
    "parts": "part_count",
    "layout": "layout",
    "partition": "partition",
    "directed": "directed",
    "complete": "complete",
    "order": "order",
    "near": "near",
    "min_degree": "min_degree",
    "width": "canvas_width",
    "height": "canvas_height",
    "seed": "rng_seed",
}


def config_from_args(args: argparse.Namespace) -> GraphConfig:
    if args.kind:
        config = config_for_kind(GraphKind(args.kind), args.size or GraphConfig.total_size)
    else:
        config = GraphConfig()

    overrides = {}
    for flag, field_name in _FLAG_FIELDS.items():
        value = getattr(args, flag)
        if value is not None:
            overrides[field_name] = value
    if "layout" in overrides:
        overrides["layout"] = Layout(overrides["layout"])
    if "partition" in overrides:
        overrides["partition"] = Partition(overrides["partition"])
    return replace(config, **overrides)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    config = config_from_args(args)
    logger.info("Generating graph with %s", config)
    try:
        graph = generate_graph(config)
    except InvalidConfiguration as exc:
        logger.error("Invalid configuration: %s", exc)
        raise SystemExit(2) from exc

    if args.format == "json":
        print(json.dumps(graph_to_dict(graph), indent=2))
    else:
        print(print_graph(graph), end="")


if __name__ == "__main__":
    main(sys.argv[1:])
