"""Example pipeline: generate every named graph kind with the same seed."""

from randgraph import GraphKind, generate_kind


def main() -> None:
    for kind in GraphKind:
        graph = generate_kind(kind, 7, rng_seed=42)
        degrees = [graph.degree(node.index) for node in graph.nodes]
        print(f"{kind.value}: parts={[len(part) for part in graph.parts]} edges={len(graph.edges)}")
        print(f"  degrees: {degrees}")


if __name__ == "__main__":
    main()
