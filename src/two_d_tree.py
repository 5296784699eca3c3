from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
import math

from containers import Queue, Stack
from crime_list import CrimeList


class EmptyTreeError(LookupError):
    "Αναζήτηση πλησιέστερου γείτονα σε άδειο δέντρο."


class InvalidRangeError(ValueError):
    "Ορθογώνιο αναζήτησης με ανεστραμμένα όρια (min > max)."


@dataclass
class TreeNode:
    "Κόμβος του 2D tree."

    x: float
    y: float
    payload: Any                    #i arxiki eggrafi (p.x. grammi tou csv)
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass
class Neighbor:
    "Αποτέλεσμα αναζήτησης πλησιέστερου γείτονα."

    node: TreeNode
    distance: float
    nodes_examined: int

    @property
    def payload(self) -> Any:
        return self.node.payload


def axis_of(depth: int) -> int:
    "0 για τον άξονα x (άρτιο βάθος), 1 για τον άξονα y (περιττό βάθος)."
    return depth % 2


def query_value(x: float, y: float, depth: int) -> float:
    "Η συντεταγμένη ενός σημείου στον άξονα του συγκεκριμένου βάθους."
    return x if axis_of(depth) == 0 else y


def axis_value(node: TreeNode, depth: int) -> float:
    "Η συντεταγμένη του κόμβου στον άξονα διαχωρισμού του βάθους depth."
    return query_value(node.x, node.y, depth)


class TwoDTree:
    """Μη ισορροπημένο 2D tree για σημεία (x, y) με payload.

Το σχήμα του δέντρου εξαρτάται μόνο από τη σειρά εισαγωγής: στο βάθος d
συγκρίνουμε x όταν το d είναι άρτιο και y όταν είναι περιττό, τα μικρότερα
πάνε αριστερά και τα ίσα ή μεγαλύτερα δεξιά. Όλες οι διασχίσεις γίνονται
με ρητή στοίβα/ουρά ώστε ένα εκφυλισμένο (σχεδόν γραμμικό) δέντρο να μη
χτυπάει το όριο αναδρομής."""

    def __init__(self):
        self.root: Optional[TreeNode] = None
        self.size = 0
        self._nodes_examined = 0

    @classmethod
    def from_records(cls, records: Iterable[Tuple[float, float, Any]]) -> "TwoDTree":
        "Χτίζει δέντρο εισάγοντας τις τριάδες (x, y, payload) με τη σειρά."
        tree = cls()
        for x, y, payload in records:
            tree.insert(x, y, payload)
        return tree

    def is_empty(self) -> bool:
        "Επιστρέφει True αν το δέντρο είναι άδειο."
        return self.root is None

    def __len__(self) -> int:
        "Επιστρέφει πόσα σημεία περιέχει το δέντρο."
        return self.size

    #insertion
    def insert(self, x: float, y: float, payload: Any) -> None:
        "Εισάγει νέο σημείο χωρίς έλεγχο για διπλότυπα."
        new_node = TreeNode(x=float(x), y=float(y), payload=payload)
        self.size += 1

        if self.root is None:
            self.root = new_node
            return

        node = self.root
        depth = 0
        while True:
            #mikrotero -> aristera, iso i megalitero -> dexia
            if query_value(new_node.x, new_node.y, depth) < axis_value(node, depth):
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right
            depth += 1

    def height(self) -> int:
        "Αριθμός επιπέδων του δέντρου (0 για άδειο δέντρο)."
        if self.root is None:
            return 0

        height = 0
        queue = Queue()
        queue.enqueue((self.root, 1))
        while not queue.is_empty():
            node, level = queue.dequeue()
            height = max(height, level)
            if node.left is not None:
                queue.enqueue((node.left, level + 1))
            if node.right is not None:
                queue.enqueue((node.right, level + 1))
        return height

    #diasxiseis
    def pre_order(self) -> List[Any]:
        "Κόμβος, αριστερό υποδέντρο, δεξί υποδέντρο."
        result: List[Any] = []
        if self.root is None:
            return result

        stack = Stack()
        stack.push(self.root)
        while not stack.is_empty():
            node = stack.pop()
            result.append(node.payload)
            #prota to dexi gia na vgei meta to aristero
            if node.right is not None:
                stack.push(node.right)
            if node.left is not None:
                stack.push(node.left)
        return result

    def in_order(self) -> List[Any]:
        "Αριστερό υποδέντρο, κόμβος, δεξί υποδέντρο."
        result: List[Any] = []
        stack = Stack()
        node = self.root
        while node is not None or not stack.is_empty():
            while node is not None:
                stack.push(node)
                node = node.left
            node = stack.pop()
            result.append(node.payload)
            node = node.right
        return result

    def post_order(self) -> List[Any]:
        "Αριστερό υποδέντρο, δεξί υποδέντρο, κόμβος."
        result: List[Any] = []
        if self.root is None:
            return result

        #h deuteri stoiva kratane kombo, dexi, aristero -> vgainoun anapoda
        pending = Stack()
        output = Stack()
        pending.push(self.root)
        while not pending.is_empty():
            node = pending.pop()
            output.push(node)
            if node.left is not None:
                pending.push(node.left)
            if node.right is not None:
                pending.push(node.right)

        while not output.is_empty():
            result.append(output.pop().payload)
        return result

    def level_order(self) -> List[Any]:
        "Κατά πλάτος, από πάνω προς τα κάτω και από αριστερά προς τα δεξιά."
        result: List[Any] = []
        if self.root is None:
            return result

        queue = Queue()
        queue.enqueue(self.root)
        while not queue.is_empty():
            node = queue.dequeue()
            result.append(node.payload)
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)
        return result

    def reverse_level_order(self) -> List[Any]:
        "Level order όπου κάθε κόμβος μπαίνει σε στοίβα και στο τέλος η στοίβα αδειάζει."
        result: List[Any] = []
        if self.root is None:
            return result

        queue = Queue()
        stack = Stack()
        queue.enqueue(self.root)
        while not queue.is_empty():
            node = queue.dequeue()
            stack.push(node)
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)

        #apo kato pros ta pano, dexia pros aristera se kathe epipedo
        while not stack.is_empty():
            result.append(stack.pop().payload)
        return result

    def traverse(self, order: str) -> List[Any]:
        "Επιστρέφει τα payloads με μία από τις σειρές pre, in, post, level, reverse-level."
        orders: Dict[str, Callable[[], List[Any]]] = {
            "pre": self.pre_order,
            "in": self.in_order,
            "post": self.post_order,
            "level": self.level_order,
            "reverse-level": self.reverse_level_order,
        }
        if order not in orders:
            raise ValueError(f"Unknown traversal order: {order!r} (expected one of {sorted(orders)})")
        return orders[order]()

    #range search
    def range_search(self, x_min: float, y_min: float, x_max: float, y_max: float) -> CrimeList:
        "Επιστρέφει τα payloads των σημείων μέσα στο ορθογώνιο [x_min, x_max] x [y_min, y_max]."
        if x_min > x_max or y_min > y_max:
            raise InvalidRangeError(
                f"Inverted rectangle: ({x_min}, {y_min}) - ({x_max}, {y_max})"
            )

        results = CrimeList()
        if self.root is None:
            return results

        lower = (x_min, y_min)
        upper = (x_max, y_max)

        stack = Stack()
        stack.push((self.root, 0))
        while not stack.is_empty():
            node, depth = stack.pop()

            #to idio to simeio
            if x_min <= node.x <= x_max and y_min <= node.y <= y_max:
                results.add_crime(node.payload)

            axis = axis_of(depth)
            value = axis_value(node, depth)

            #dexi prota sti stoiva oste to aristero na eksetastei proto (pre-order)
            if node.right is not None and upper[axis] >= value:
                stack.push((node.right, depth + 1))
            if node.left is not None and lower[axis] <= value:
                stack.push((node.left, depth + 1))

        return results

    #nearest neighbor
    def nearest_neighbor(self, qx: float, qy: float) -> Neighbor:
        """Πλησιέστερο αποθηκευμένο σημείο στο (qx, qy) με ευκλείδεια απόσταση.

Σε ισοπαλία κρατάμε το πρώτο που βρέθηκε. Η πλευρά του query ("near")
εξετάζεται πάντα, η άλλη μόνο αν η απόσταση από την ευθεία διαχωρισμού
είναι μικρότερη από την καλύτερη απόσταση τη στιγμή που φτάνουμε σε αυτήν."""

        if self.root is None:
            raise EmptyTreeError("nearest neighbor search on an empty tree")
        if not (math.isfinite(qx) and math.isfinite(qy)):
            raise ValueError(f"Query point must be finite, got ({qx}, {qy})")

        best_node: Optional[TreeNode] = None
        best_distance = math.inf
        examined = 0

        #(kombos, vathos, apostasi apo to epipedo i None an den xreiazetai elegxos)
        stack = Stack()
        stack.push((self.root, 0, None))
        while not stack.is_empty():
            node, depth, plane_distance = stack.pop()

            #pruning: o elegxos ginetai afou exei teleiosei to near ipodentro
            if plane_distance is not None and not plane_distance < best_distance:
                continue

            examined += 1

            dx = node.x - qx
            dy = node.y - qy
            distance = math.hypot(dx, dy)
            #o protos kombos einai panta o arxikos kaliteros
            if best_node is None or distance < best_distance:
                best_node = node
                best_distance = distance

            diff = query_value(qx, qy, depth) - axis_value(node, depth)
            if diff < 0:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left

            if far is not None:
                stack.push((far, depth + 1, abs(diff)))
            if near is not None:
                stack.push((near, depth + 1, None))

        self._nodes_examined = examined
        return Neighbor(node=best_node, distance=best_distance, nodes_examined=examined)

    def nodes_examined(self) -> int:
        "Πόσοι κόμβοι εξετάστηκαν στην τελευταία nearest_neighbor."
        return self._nodes_examined
