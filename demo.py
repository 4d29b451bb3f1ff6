import logging
import os

from ordtree import TreeConfig, TreeKind, create_tree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

INSERT_KEYS = [17, 18, 23, 34, 27, 15, 9, 6, 25, 13, 10, 37]
DELETE_KEYS = [18, 25, 15, 6, 13, 37, 27, 17, 34, 9, 10]


def run(kind: TreeKind, allow_duplicates: bool) -> list[int]:
    tree = create_tree(kind, allow_duplicates=allow_duplicates)
    for key in INSERT_KEYS:
        tree.insert(key)
    print(tree.in_order())

    for key in DELETE_KEYS:
        tree.delete(key)
        print(f"Deleted {key}: {tree.in_order()}")

    tree.check_invariants()
    return tree.in_order()


def main():
    config = TreeConfig.from_env()
    logger.debug(f"Duplicates allowed: {config.allow_duplicates}")

    results = {}
    for kind in TreeKind:
        print(f"{'=' * 20} Test {kind.value} {'=' * 20}")
        results[kind] = run(kind, config.allow_duplicates)
        print()

    if len({tuple(result) for result in results.values()}) != 1:
        logger.error(f"Tree variants disagree: {results}")
    else:
        logger.info(f"All tree variants agree: {results[TreeKind.RBTREE]}")


if __name__ == "__main__":
    main()
