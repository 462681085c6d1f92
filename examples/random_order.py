"""Example pipeline: uniformly sample a fixed number of directed edges."""

import json

from randgraph import GraphConfig, Layout, generate_graph, graph_to_dict


def main() -> None:
    config = GraphConfig(
        total_size=6,
        part_count=3,
        layout=Layout.SCATTER,
        directed=True,
        near=False,
        order=5,
        rng_seed=7,
    )
    graph = generate_graph(config)
    print(json.dumps(graph_to_dict(graph), indent=2))


if __name__ == "__main__":
    main()
