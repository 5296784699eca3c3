from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from brute_force import evaluate_tree
from crime_data import (
    build_crime_tree,
    crime_points,
    default_data_path,
    load_dataset,
    preprocess_dataset,
)
from kml_export import write_kml
from two_d_tree import EmptyTreeError, InvalidRangeError, TwoDTree


@dataclass
class DriverConfig:

    "Ρυθμίσεις του driver (αρχεία και query για το performance summary)."
    data_path: Path = default_data_path()
    kml_path: Path = Path("PGHCrimes.kml")
    demo_rect: Tuple[float, float, float, float] = (1357605.0, 411966.0, 1359700.0, 414000.0)
    demo_query: Tuple[float, float] = (1358000.0, 413000.0)


MENU = """
What would you like to do?
1: Inorder
2: Preorder
3: Level Order
4: Postorder
5: Reverse Level Order
6: Search for points within rectangle
7: Search for nearest neighbor
8: Quit
9: Performance summary"""

TRAVERSALS = {
    "1": "in",
    "2": "pre",
    "3": "level",
    "4": "post",
    "5": "reverse-level",
}


def read_floats(answer: str, count: int) -> List[float]:
    "Διαβάζει ακριβώς count αριθμούς χωρισμένους με κενά."
    values = [float(v) for v in answer.split()]
    if len(values) != count:
        raise ValueError(f"Expected {count} numbers, got {len(values)}")
    #nan kai inf den einai syntetagmenes
    if not all(math.isfinite(v) for v in values):
        raise ValueError(f"Expected finite numbers, got {answer.strip()}")
    return values


#fortosi dedomenon + dentro
def prepare_tree(config: DriverConfig) -> Tuple[TwoDTree, np.ndarray]:
    df_raw = load_dataset(config.data_path)
    df = preprocess_dataset(df_raw)
    tree, build_time = build_crime_tree(df)
    print(f"[TREE] Built 2D tree with {len(tree)} crimes in {build_time:.4f} s (height {tree.height()})")
    return tree, crime_points(df)


def print_payloads(payloads) -> None:
    for p in payloads:
        print(p)


def run_range_search(tree: TwoDTree, config: DriverConfig, x1: float, y1: float, x2: float, y2: float) -> None:
    print(f"Searching for points within ({x1},{y1}) and ({x2},{y2})")
    crimes = tree.range_search(x1, y1, x2, y2)
    for line in crimes.format_lines():
        print(line)

    try:
        write_kml(crimes, config.kml_path)
    except OSError as e:
        print(f"[KML] Error writing KML file: {e}")
        return
    print(f"The crime data has been written to {config.kml_path}. It is viewable in Google Earth Pro.")


def run_nearest_neighbor(tree: TwoDTree, x: float, y: float) -> None:
    nearest = tree.nearest_neighbor(x, y)
    print(f"Looked at {tree.nodes_examined()} nodes in tree. Found the nearest crime at:")
    print(nearest.payload)
    print(f"Distance: {nearest.distance:.4f}")


def print_summary(stats: Dict[str, float | int]) -> None:
    print("\n")
    print("[PERF] 2D TREE vs LINEAR SCAN (seconds)")
    print(f"{'Query':<10} {'Tree':>10} {'Scan':>10} {'Result':>14}")
    print(
        f"{'Range':<10} "
        f"{stats['range']:10.6f} "
        f"{stats['range_bruteforce']:10.6f} "
        f"{stats['range_results']:7d}/{stats['range_results_bruteforce']:<6d}"
    )
    print(
        f"{'Nearest':<10} "
        f"{stats['nn']:10.6f} "
        f"{stats['nn_bruteforce']:10.6f} "
        f"{stats['nn_distance']:14.4f}"
    )
    print(f"  Nodes examined : {stats['nodes_examined']} of {stats['size']} (height {stats['height']})")


def run_menu(
    tree: TwoDTree,
    points: np.ndarray,
    config: DriverConfig,
    input_fn: Callable[[str], str] = input,
) -> None:
    "Ο βρόχος του μενού. Λάθος είσοδος τυπώνει μήνυμα και το μενού ξαναεμφανίζεται."
    while True:
        print(MENU)
        try:
            choice = input_fn("> ").strip()
        except EOFError:
            choice = "8"

        if choice in TRAVERSALS:
            print_payloads(tree.traverse(TRAVERSALS[choice]))

        elif choice == "6":
            answer = input_fn(
                "Enter a rectangle bottom left (X1, Y1) and top right (X2, Y2) "
                "as four doubles each separated by a space:\n"
            )
            try:
                x1, y1, x2, y2 = read_floats(answer, 4)
                run_range_search(tree, config, x1, y1, x2, y2)
            except InvalidRangeError as e:
                print(f"Invalid rectangle: {e}")
            except ValueError as e:
                print(f"Invalid input: {e}")

        elif choice == "7":
            answer = input_fn("Enter a point to find the nearest crime (X Y):\n")
            try:
                x, y = read_floats(answer, 2)
                run_nearest_neighbor(tree, x, y)
            except EmptyTreeError:
                print("The tree is empty, there is no nearest crime.")
            except ValueError as e:
                print(f"Invalid input: {e}")

        elif choice == "8":
            print("Thank you for exploring Pittsburgh crimes in the 1990's.")
            return

        elif choice == "9":
            if tree.is_empty():
                print("The tree is empty, nothing to measure.")
                continue
            stats = evaluate_tree(tree, points, config.demo_rect, config.demo_query)
            print_summary(stats)

        else:
            print("Invalid option. Please enter a number between 1 and 9.")


#i main
def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv

    config = DriverConfig()
    if argv:
        config.data_path = Path(argv[0])

    tree, points = prepare_tree(config)
    print("Crime file loaded into 2D tree.")

    run_menu(tree, points, config)


if __name__ == "__main__":
    main()
