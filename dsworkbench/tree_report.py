"""Build the text report for a binary search tree loaded from a file of integers."""

from __future__ import annotations

import sys

from dsworkbench.tree import BinarySearchTree

BLANK = " "
DEFAULT_INPUT = "tree.txt"
DEFAULT_OUTPUT = "treeOut.txt"
DIVIDER_SYMBOL = "*"
DIVIDER_WIDTH = 63


def format_divider(section: int, symbol: str = DIVIDER_SYMBOL, width: int = DIVIDER_WIDTH) -> str:
    """Return a section divider: a numbered rule followed by an indent for the next line.

    The rule is ``width`` characters wide: ``width - 1`` copies of ``symbol``
    and a closing blank.
    """
    if len(symbol) != 1:
        raise ValueError("the divider symbol must be a single character")
    if width < 1:
        raise ValueError("the divider width must be at least 1")
    rule = f"{BLANK:{symbol}>{width}}"
    return f"\n\n#{section:>2}{BLANK}{rule}\n{BLANK:>3}"


def format_count(count: int) -> str:
    """Return the line reporting how many nodes the tree holds."""
    return f" Number of Nodes currently in the tree are: {count}\n"


def build_report(text: str) -> str:
    """Return the full report for the integers in ``text``.

    The report shows the empty tree, then the tree after loading ``text``,
    each followed by a divider, and finally the node count.
    """
    tree = BinarySearchTree()
    section = -1
    parts = [tree.render(), format_divider(section)]
    section += 1
    tree.load(text)
    parts.append(tree.render())
    parts.append(format_divider(section))
    parts.append(format_count(len(tree)))
    parts.append("\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Read integers from the input file and write the report to the output file.

    With no arguments the default file names are used; otherwise an input and
    an output path are expected.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 0:
        input_path, output_path = DEFAULT_INPUT, DEFAULT_OUTPUT
    elif len(args) == 2:
        input_path, output_path = args
    else:
        print("tree_report [input_file output_file]", file=sys.stderr)
        return 2
    try:
        with open(input_path, encoding="utf-8") as source:
            report = build_report(source.read())
        with open(output_path, "w", encoding="utf-8") as target:
            target.write(report)
    except (OSError, ValueError) as error:
        print(f"[X] Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())