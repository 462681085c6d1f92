"""Example pipeline: build a two-part graph on an aligned layout."""

from randgraph import GraphConfig, Layout, Partition, generate_graph, print_graph


def main() -> None:
    config = GraphConfig(
        total_size=8,
        part_count=2,
        layout=Layout.ALIGNED,
        partition=Partition.SPLIT,
        near=True,
        rng_seed=123,
    )
    graph = generate_graph(config)
    print(print_graph(graph), end="")

    print("Adjacency:")
    for index, neighbours in graph.adjacency().items():
        print(f"  {index}: {list(neighbours)}")


if __name__ == "__main__":
    main()
