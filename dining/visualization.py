import matplotlib.pyplot as plt
import networkx as nx


def visualize_wait_for_graph(graph, cycle=None, path=None):
    """
    Draws the wait-for graph of the philosophers.

    Args:
        graph (networkx.DiGraph): edges point from a waiting philosopher to the
            philosopher holding the fork it wants.
        cycle (list): Optional list of philosophers forming a wait cycle.
        path (str): Where to save the figure. The figure is shown when omitted.
    """
    pos = nx.circular_layout(graph)

    fig = plt.figure(figsize=(12, 8))
    nx.draw(
        graph,
        pos,
        labels={node: f"P{node}" for node in graph.nodes},
        node_color="lightblue",
        node_size=2500,
        font_size=12,
        font_weight="bold",
        edge_color="gray",
    )
    nx.draw_networkx_edge_labels(
        graph,
        pos,
        edge_labels={(u, v): f"Fork-{d['fork']}" for u, v, d in graph.edges(data=True) if "fork" in d},
    )

    if cycle:
        cycle_edges = [(cycle[i], cycle[(i + 1) % len(cycle)]) for i in range(len(cycle))]
        nx.draw_networkx_edges(graph, pos, edgelist=cycle_edges, edge_color="red", width=3)
        nx.draw_networkx_nodes(graph, pos, nodelist=cycle, node_color="orange", node_size=3000)
        plt.title("Deadlock Detected: Cycle Highlighted", fontsize=16, color="red")
    else:
        plt.title("Wait-For Graph", fontsize=16)

    plt.legend(
        handles=[
            plt.Line2D([0], [0], color="gray", lw=2, label="Waiting for"),
            plt.Line2D([0], [0], color="red", lw=2, label="Deadlock Cycle"),
            plt.Line2D(
                [0],
                [0],
                marker="o",
                color="w",
                markerfacecolor="orange",
                markersize=15,
                label="Deadlocked Philosophers",
            ),
        ],
        loc="upper left",
    )

    if path:
        fig.savefig(path)
        plt.close(fig)
    else:
        plt.show()
