#!/usr/bin/env python3
"""
Render sample planar graphs to PNG.

Each sample runs the full pipeline:
1. Seeded point placement
2. Crossing-free spanning forest
3. Leaf augmentation (triangulation neighborhood or boundary walk)

Usage:
    python generate_sample_graphs.py [seed]

If no seed is provided, defaults to 42
"""

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent))

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from py_graphgen.core.graph_generator import generate, leaf_nodes
from py_graphgen.core.graph_model import NodeGroup

GROUP_COLORS = {
    NodeGroup.DEFAULT: "#1b9e77",
    NodeGroup.ISOLATED: "#e7298a",
    NodeGroup.HULL: "#e6ab02",
}


def create_graph_image(point_count=60, width=800, height=600, seed=42,
                       connectivity_control=50, strategy="neighborhood"):
    """Generate one graph and save it as a PNG."""

    print(f"\nGenerating {strategy} graph...")
    print(f"  Field: {width}x{height}")
    print(f"  Points: {point_count}")
    print(f"  Connectivity control: {connectivity_control}")

    graph = generate(point_count, seed, width, height, connectivity_control, strategy)
    by_id = {node.id: node for node in graph.nodes}

    print(f"  Spanning edges: {graph.spanning_edge_count}")
    print(f"  Augmentation edges: {len(graph.edges) - graph.spanning_edge_count}")
    print(f"  Isolated nodes: {len(graph.isolated)}")
    print(f"  Leaves: {len(leaf_nodes(graph))}")

    fig, ax = plt.subplots(figsize=(width / 100, height / 100))

    for index, edge in enumerate(graph.edges):
        source, target = by_id[edge.source], by_id[edge.target]
        augmented = index >= graph.spanning_edge_count
        ax.plot([source.x, target.x], [source.y, target.y],
                color="#d95f02" if augmented else "#d1d5db",
                linewidth=1.5 if augmented else 3, zorder=1)

    ax.scatter([node.x for node in graph.nodes], [node.y for node in graph.nodes],
               c=[GROUP_COLORS.get(node.group, "#666666") for node in graph.nodes],
               s=40, zorder=2)

    # SVG-style coordinates: y grows downwards
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(f"{strategy} - {point_count} points - seed {seed}", fontsize=12)

    output_file = f"graph_{strategy}_{seed}.png"
    plt.savefig(output_file, dpi=150, bbox_inches="tight", pad_inches=0.1)
    print(f"  Saved to: {output_file}")

    plt.close(fig)

    return graph


def main():
    """Generate sample graphs for both augmentation strategies."""

    seed = float(sys.argv[1]) if len(sys.argv) > 1 else 42

    print("Generating sample graphs")
    print(f"Using seed: {seed}")
    print("=" * 60)

    for strategy in ("neighborhood", "boundary_walk"):
        create_graph_image(seed=seed, strategy=strategy)

    print("\n" + "=" * 60)
    print("All graphs generated")


if __name__ == "__main__":
    main()
