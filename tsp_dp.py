from typing import Dict, List, Optional, Tuple

from utils import MAX_CITIES, NO_PATH


def full_mask(n: int) -> int:
    """Visited mask with the lowest n bits set, for 1 <= n <= 64."""
    if not 1 <= n <= MAX_CITIES:
        raise ValueError(f"Unsupported size: {n} cities (must be between 1 and {MAX_CITIES}).")
    # shift the all-ones word right instead of shifting 1 left by the word width
    return NO_PATH >> (MAX_CITIES - n)


def bit(city: int) -> int:
    return 1 << city


def saturating_add(a: int, b: int) -> int:
    """Add two costs, pinning the result at NO_PATH instead of overflowing past it."""
    if a == NO_PATH or b == NO_PATH:
        return NO_PATH
    return min(a + b, NO_PATH)


class Route:
    __slots__ = ("cities", "edges", "path_cost", "return_edge", "total_cost")

    def __init__(self, edges, return_edge=None):
        # edges: [(from, cost, to), ...] in visiting order
        self.edges = list(edges)
        self.cities = [0] + [to for _, _, to in self.edges]
        self.path_cost = sum(cost for _, cost, _ in self.edges)
        self.return_edge = return_edge
        self.total_cost = self.path_cost
        if return_edge is not None:
            self.total_cost += return_edge[1]

    @property
    def closed(self) -> bool:
        return self.return_edge is not None

    def all_edges(self) -> List[Tuple[int, int, int]]:
        """Edges of the route including the leg back to the start, when there is one."""
        if self.return_edge is None:
            return list(self.edges)
        return self.edges + [self.return_edge]

    def __repr__(self):
        return f"Route(cities={self.cities}, path_cost={self.path_cost}, total_cost={self.total_cost})"


class TSPSolver:
    """
    Held-Karp DP over (current city, visited mask) states, starting at city 0.

    Input requirement:
      - cost_matrix is n x n with 1 <= n <= 64
      - entries are non-negative integers; NO_PATH marks a missing edge
      - the diagonal is never consulted

    best_cost[(c, v)] is the minimum cost of visiting every city outside v
    starting from c, without the leg back to city 0. next_city[(c, v)] is the
    city to move to next, or None. A state missing from both tables has not
    been computed yet; a stored NO_PATH means it was computed and is infeasible.
    """

    def __init__(self, cost_matrix):
        n = len(cost_matrix)
        if n == 0 or n > MAX_CITIES:
            raise ValueError(f"Unsupported size: {n} cities (must be between 1 and {MAX_CITIES}).")
        for i, row in enumerate(cost_matrix):
            if len(row) != n:
                raise ValueError(f"Cost matrix must be square: row {i} has {len(row)} entries, expected {n}.")
            for j, cost in enumerate(row):
                if isinstance(cost, bool) or not isinstance(cost, int) or not 0 <= cost <= NO_PATH:
                    raise ValueError(f"Cost from {i} to {j} must be an integer in [0, NO_PATH], got {cost!r}.")

        self.n = n
        self.cost = [list(row) for row in cost_matrix]
        self.full_mask = full_mask(n)
        self.best_cost: Dict[Tuple[int, int], int] = {}
        self.next_city: Dict[Tuple[int, int], Optional[int]] = {}
        self.expansions = 0  # states whose successors were actually scanned

    def solve(self, current: int = 0, visited: int = 1) -> int:
        """
        Minimum cost to visit every city not in `visited`, starting from `current`.
        Returns NO_PATH when no such path exists.
        """
        if not 0 <= current < self.n:
            raise ValueError(f"City index {current} out of range for {self.n} cities.")
        if visited & ~self.full_mask or not visited & bit(current):
            raise ValueError(f"Visited mask {visited:#x} is not a valid state for city {current}.")
        return self._solve(current, visited)

    def _solve(self, current: int, visited: int) -> int:
        key = (current, visited)
        if key in self.best_cost:
            return self.best_cost[key]

        if visited == self.full_mask:
            # every city visited; the return leg is not part of the recurrence
            self.best_cost[key] = 0
            self.next_city[key] = None
            return 0

        self.expansions += 1
        min_cost = NO_PATH
        best_next = None
        row = self.cost[current]
        for nxt in range(self.n):
            if visited & bit(nxt) or row[nxt] == NO_PATH:
                continue
            rest = self._solve(nxt, visited | bit(nxt))
            if rest == NO_PATH:
                continue
            cost = saturating_add(row[nxt], rest)
            # strict comparison keeps the lowest index among ties
            if cost < min_cost:
                min_cost = cost
                best_next = nxt

        self.best_cost[key] = min_cost
        self.next_city[key] = best_next
        return min_cost

    def reconstruct(self) -> Optional[Route]:
        """
        Walk next_city from the start state (0, {0}).

        Returns None when the start state is infeasible. Otherwise the Route,
        whose path_cost equals solve(0, 1). The edge back to city 0 is appended
        afterwards as return_edge when the matrix has one.
        """
        result = self.solve(0, 1)
        if result == NO_PATH:
            return None

        edges = []
        current, visited = 0, 1
        while True:
            nxt = self.next_city[(current, visited)]
            if nxt is None:
                break
            edges.append((current, self.cost[current][nxt], nxt))
            visited |= bit(nxt)
            current = nxt

        return_edge = None
        if current != 0 and self.cost[current][0] != NO_PATH:
            return_edge = (current, self.cost[current][0], 0)
        return Route(edges, return_edge)


def tsp_dp(cost_matrix) -> Optional[Route]:
    """
    Solve TSP from city 0 with Held-Karp DP.

    Returns:
      - Route with the optimal visiting order, or None if no path visits every city
    """
    return TSPSolver(cost_matrix).reconstruct()
