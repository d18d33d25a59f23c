import argparse
import logging

from fastrtree import RTree


def main():
    parser = argparse.ArgumentParser(description="Insert three rectangles and search them.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log splits")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Two children per node, so the third insert splits the root
    tree = RTree(2)
    tree.insert((0, 0, 1, 1))
    tree.insert((2, 2, 3, 3))
    tree.insert((4, 4, 5, 5))

    query = (2.5, 2.5, 4.5, 4.5)
    results = tree.search(query)
    print(
        f"Found {len(results)} rectangles that overlap with "
        f"({query[0]}, {query[1]}, {query[2]}, {query[3]})"
    )
    for min_x, min_y, max_x, max_y in results:
        print(f"({min_x:g}, {min_y:g}, {max_x:g}, {max_y:g})")


if __name__ == "__main__":
    main()
