import sys
import argparse

from tsp_dp import tsp_dp
from tsp_utils import (
    draw_route,
    format_route,
    input_file_to_instance,
    write_route_to_out,
)


def tsp_solver(file):
    """
    TSP solver for an input file of `City1-City2: Distance` lines.

    Returns:
        tuple: (G, cities, route) where route is None if no valid route exists.
    """
    G, cities, matrix = input_file_to_instance(file)
    route = tsp_dp(matrix)
    return G, cities, route


def main(argv=None):
    parser = argparse.ArgumentParser(description="Shortest route visiting every city once.")
    parser.add_argument('filename', type=str)
    parser.add_argument('--out', action='store_true', help='also write the route to the outputs directory')
    parser.add_argument('--draw', action='store_true', help='draw the graph with the route highlighted')
    args = parser.parse_args(argv)

    try:
        G, cities, route = tsp_solver(args.filename)
    except OSError:
        print("Error opening the file", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if route is not None:
        print("We will visit the cities in the following order:")
    for line in format_route(route, cities):
        print(line)

    if args.out:
        write_route_to_out(route, cities, args.filename)
    if args.draw:
        draw_route(G, cities, route)
    return 0


if __name__ == "__main__":
    sys.exit(main())
