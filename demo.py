"""
AVL Tree Demo -- Reference driver, rotation cases, height growth, and deletion churn.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from balanced_tree import AVLTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}


def node_positions(tree):
    """Map each value to (in-order index, depth) for drawing."""
    positions = {}
    edges = []
    order = {v: i for i, v in enumerate(tree.in_order())}

    def walk(node, depth):
        if node is None:
            return
        positions[node.value] = (order[node.value], -depth)
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.value, child.value))
                walk(child, depth + 1)

    walk(tree._root, 0)
    return positions, edges


def draw_tree(ax, tree, title):
    positions, edges = node_positions(tree)
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [y0, y1], color=COLORS["dark"], linewidth=1, zorder=1)
    for value, (x, y) in positions.items():
        ax.scatter(x, y, s=500, color=COLORS["blue"], edgecolor="white", zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", fontsize=9,
                color="white", fontweight="bold", zorder=3)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.axis("off")
    ax.margins(0.15)


# ---------------------------------------------------------------------------
# Example 1: Reference Driver
# ---------------------------------------------------------------------------
def example_1_reference_driver():
    """Insert 1..63, delete 10..30, and check membership."""
    print("=" * 60)
    print("Example 1: Reference Driver")
    print("=" * 60)

    tree: AVLTree[int] = AVLTree()
    for i in range(1, 64):
        tree.insert(i)
    print(f"  After inserting 1..63: {tree}")

    for i in range(10, 31):
        tree.delete(i)
    print(f"  After deleting 10..30: {tree}")

    for i in range(1, 10):
        assert tree.contains(i)
    for i in range(10, 31):
        assert not tree.contains(i)
    for i in range(31, 64):
        assert tree.contains(i)
    assert tree.size() == 42

    for i in (1, 3, 7):
        tree.delete(i)
    assert tree.is_balanced()
    print(f"  After deleting 1, 3, 7:  {tree}")
    print("\n  Tree operations successful.")


# ---------------------------------------------------------------------------
# Example 2: The Four Rotation Cases
# ---------------------------------------------------------------------------
def example_2_rotation_cases():
    """Each three-key insertion order triggers one rotation case."""
    print("\n" + "=" * 60)
    print("Example 2: The Four Rotation Cases")
    print("=" * 60)

    cases = [
        ("Left-left -> right rotation", [30, 20, 10]),
        ("Right-right -> left rotation", [10, 20, 30]),
        ("Left-right -> double rotation", [30, 10, 20]),
        ("Right-left -> double rotation", [10, 30, 20]),
    ]

    fig, axes = plt.subplots(1, len(cases) + 1, figsize=(18, 4))
    for ax, (name, order) in zip(axes, cases):
        tree: AVLTree[int] = AVLTree()
        for v in order:
            tree.insert(v)
        print(f"  {name:32s} insert {order} -> pre-order {tree.pre_order()}")
        draw_tree(ax, tree, f"{name}\ninsert {order}")

    perfect: AVLTree[int] = AVLTree()
    for v in range(1, 8):
        perfect.insert(v)
    print(f"  Ascending 1..7 -> pre-order {perfect.pre_order()}")
    draw_tree(axes[-1], perfect, "Ascending 1..7\nperfectly balanced")

    fig.suptitle("AVL Rotation Cases", fontsize=14, fontweight="bold", y=1.05)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_rotation_cases.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_rotation_cases.png")


# ---------------------------------------------------------------------------
# Example 3: Height Growth
# ---------------------------------------------------------------------------
def example_3_height_growth():
    """Tree height against n for ascending and shuffled insertion."""
    print("\n" + "=" * 60)
    print("Example 3: Height Growth")
    print("=" * 60)

    sizes = np.unique(np.logspace(0, 4, 30).astype(int))
    ascending_heights = []
    shuffled_heights = []

    for n in sizes:
        ascending: AVLTree[int] = AVLTree()
        for v in range(n):
            ascending.insert(v)
        shuffled: AVLTree[int] = AVLTree()
        for v in np.random.permutation(n):
            shuffled.insert(int(v))
        ascending_heights.append(ascending.height())
        shuffled_heights.append(shuffled.height())

    lower = np.floor(np.log2(sizes))
    upper = 1.4405 * np.log2(sizes + 2) - 1.3277

    for n, a, s in list(zip(sizes, ascending_heights, shuffled_heights))[::6]:
        print(f"  n={n:6d}  ascending height={a:3d}  shuffled height={s:3d}")
    assert all(h <= u for h, u in zip(shuffled_heights, upper))

    fig, ax = plt.subplots(figsize=(9, 6))
    ax.plot(sizes, ascending_heights, "o-", color=COLORS["blue"], label="Ascending insert")
    ax.plot(sizes, shuffled_heights, "s-", color=COLORS["orange"], label="Shuffled insert")
    ax.plot(sizes, lower, "--", color=COLORS["green"], label="floor(log2 n) (perfect tree)")
    ax.plot(sizes, upper, "--", color=COLORS["red"], label="1.44 log2(n+2) - 1.33 (AVL bound)")
    ax.set_xscale("log")
    ax.set_xlabel("Number of keys n")
    ax.set_ylabel("Tree height (edges)")
    ax.set_title("AVL Height Stays Logarithmic", fontsize=12, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_height_growth.png")


# ---------------------------------------------------------------------------
# Example 4: Deletion Churn
# ---------------------------------------------------------------------------
def example_4_deletion_churn():
    """Size and height while deleting random keys from a full tree."""
    print("\n" + "=" * 60)
    print("Example 4: Deletion Churn")
    print("=" * 60)

    n = 2000
    tree: AVLTree[int] = AVLTree()
    for v in np.random.permutation(n):
        tree.insert(int(v))

    sizes = [tree.size()]
    heights = [tree.height()]
    misses = 0
    for v in np.random.randint(0, n, size=3 * n):
        if not tree.delete(int(v)):
            misses += 1
        sizes.append(tree.size())
        heights.append(tree.height())

    assert tree.is_balanced()
    print(f"  Deletes attempted: {3 * n}, misses (already gone): {misses}")
    print(f"  Final: {tree}")

    steps = np.arange(len(sizes))
    fig, ax1 = plt.subplots(figsize=(9, 6))
    ax1.plot(steps, sizes, color=COLORS["blue"], label="Size")
    ax1.set_xlabel("Delete attempts")
    ax1.set_ylabel("Size", color=COLORS["blue"])
    ax2 = ax1.twinx()
    ax2.plot(steps, heights, color=COLORS["purple"], label="Height")
    ax2.set_ylabel("Height", color=COLORS["purple"])
    ax1.set_title("Size and Height Under Random Deletion", fontsize=12, fontweight="bold")
    ax1.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_deletion_churn.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_deletion_churn.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Bundle the visualizations into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.75, "AVL Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        info_text = (
            "A binary search tree that rotates after every insert and delete\n"
            "so sibling subtree heights never differ by more than one.\n\n"
            "This demo covers:\n"
            "  1. Reference driver: insert 1..63, delete 10..30\n"
            "  2. The four rotation cases\n"
            "  3. Height growth against the log2 bounds\n"
            "  4. Size and height under random deletion\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.38, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            fig.suptitle(viz_file.stem.replace("_", " ").title(),
                         fontsize=14, fontweight="bold", y=0.98)
            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("AVL Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_reference_driver()
    example_2_rotation_cases()
    example_3_height_growth()
    example_4_deletion_churn()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
