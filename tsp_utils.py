import os
import re

import networkx as nx
import matplotlib.pyplot as plt

from utils import *

LINE_PATTERN = re.compile(r"^([^-]+)-([^:]+):\s*(\d+)$")


def data_parser(input_data):
    """
    Parsing input data

    Every non-blank line has the form `City1-City2: Distance`.
    Returns the list of (city1, city2, distance) edges in file order.
    """
    edge_list = []
    for line_number, line in enumerate(input_data, start=1):
        line = line.strip()
        if not line:
            continue
        match = LINE_PATTERN.match(line)
        if match is None:
            raise ValueError(f"line {line_number}: expected 'City1-City2: Distance', got {line!r}")
        city1, city2 = match.group(1).strip(), match.group(2).strip()
        if not city1 or not city2:
            raise ValueError(f"line {line_number}: empty city name")
        if len(city1) > MAX_CITY_NAME_LENGTH or len(city2) > MAX_CITY_NAME_LENGTH:
            raise ValueError(
                f"line {line_number}: city name exceeds the maximum allowed length of "
                f"{MAX_CITY_NAME_LENGTH} characters"
            )
        distance = int(match.group(3))
        if distance >= NO_PATH:
            raise ValueError(f"line {line_number}: distance {distance} does not fit in 64 bits")
        edge_list.append((city1, city2, distance))
    return edge_list


def weighted_edge_list_to_graph(edge_list):
    """
    Create a graph from a weighted edge list
    Nodes keep their first-appearance order, which fixes the city indices.
    A repeated pair overwrites the earlier distance.
    """
    G = nx.Graph()
    G.add_weighted_edges_from(edge_list)
    return G


def graph_to_cost_matrix(G):
    """
    Build the dense cost matrix of G.

    Returns:
        tuple: (cities, matrix) where cities[i] is the name of city i and
        matrix[i][j] is the weight of edge i -> j, or NO_PATH if there is none.
        Directed graphs give asymmetric matrices.
    """
    cities = list(G.nodes())
    index = {city: i for i, city in enumerate(cities)}
    n = len(cities)
    matrix = [[NO_PATH] * n for _ in range(n)]
    for u, v, data in G.edges(data=True):
        weight = int(data['weight'])
        matrix[index[u]][index[v]] = weight
        if not G.is_directed():
            matrix[index[v]][index[u]] = weight
    return cities, matrix


def input_file_to_instance(file):
    """
    Create an instance of the TSP problem from a specific file.

    Parameters:
        file (str): Path of the input file.

    Returns:
        tuple: A tuple containing:
            - G (nx.Graph): The graph of cities, weighted by distance.
            - cities (list): City names, cities[i] is city index i.
            - matrix (list): The n x n cost matrix with NO_PATH for missing edges.

    Raises:
        ValueError: the file is malformed, empty, or names too many cities.
    """
    input_data = read_file(file)
    edge_list = data_parser(input_data)
    G = weighted_edge_list_to_graph(edge_list)
    if G.number_of_nodes() == 0:
        raise ValueError("The input file is empty or contains no valid data.")
    if G.number_of_nodes() > MAX_CITIES:
        raise ValueError(f"Too many cities (maximum is {MAX_CITIES}).")
    cities, matrix = graph_to_cost_matrix(G)
    return G, cities, matrix


def is_connected(G):
    """
    Check whether a graph G is connected or not
    """
    return nx.is_connected(nx.to_undirected(G))


def is_valid_input(file: str) -> tuple:
    """
    Check if the given input file is valid.

    Parameters:
        file (str): Path to the input file.

    Returns:
        tuple: A tuple containing:
            - is_valid (bool): Whether the input file is valid.
            - message (str): A log message providing details about the validation result.

    Notes:
        A disconnected graph is reported but still valid: the solver answers
        it with "no valid route" rather than an error.
    """
    is_valid = True
    message = ''

    try:
        input_data = read_file(file)
    except OSError as e:
        return False, f'Cannot open file: {e}\n'

    try:
        edge_list = data_parser(input_data)
    except ValueError as e:
        return False, f'Cannot parse data: {e}\n'

    G = weighted_edge_list_to_graph(edge_list)

    if G.number_of_nodes() == 0:
        return False, 'input file is empty\n'

    if G.number_of_nodes() > MAX_CITIES:
        is_valid = False
        message += 'maximum number of cities exceeded\n'

    if not is_connected(G):
        message += 'graph is not connected, no route can exist\n'

    seen = {}
    for u, v, w in edge_list:
        if u == v:
            message += f'edge connecting {u} with itself is ignored\n'
            continue
        pair = frozenset((u, v))
        if pair in seen and seen[pair] != w:
            message += f'distance between {u} and {v} given twice, last value {w} is used\n'
        seen[pair] = w

    return is_valid, message


def format_route(route, cities):
    """
    Render a route as lines of text.

    Each edge becomes "<from> -( <cost> )-> <to>", followed by the total cost.
    A missing route (None) renders as a single "no valid route" line.
    """
    if route is None:
        return ["No valid TSP route found."]
    lines = []
    for u, cost, v in route.all_edges():
        lines.append(f"{cities[u]} -( {cost} )-> {cities[v]}")
    if len(cities) > 1 and not route.closed:
        lines.append(f"No road leads back to {cities[0]}, the route is left open.")
    lines.append(f"Total cost: {route.total_cost}")
    return lines


def analyze_route(G, cities, route):
    """
    Analyze a route for a given instance of the problem.

    Parameters:
        G (nx.Graph): The graph of cities.
        cities (list): City names, aligned with the route indices.
        route (Route): The route to check.

    Returns:
        is_legitimate (bool): Whether the route is legitimate or not.
        cost (float): Total cost of the route, positive infinity when not legitimate.

    Notes:
        A route is legitimate if the following conditions hold:
        - It starts at city 0.
        - It visits every city exactly once.
        - It only goes through existing edges in the graph, with matching costs.
        - The leg back to city 0, if present, is an existing edge.
    """
    if route is None:
        return False, float('infinity')
    order = route.cities
    if order[0] != 0:
        print("route does not start at the first city")
        return False, float('infinity')
    if sorted(order) != list(range(len(cities))):
        print("route does not visit every city exactly once")
        return False, float('infinity')
    cost = 0
    for u, weight, v in route.all_edges():
        if not G.has_edge(cities[u], cities[v]):
            print(f"edge {cities[u], cities[v]} not exist")
            return False, float('infinity')
        if G[cities[u]][cities[v]]['weight'] != weight:
            print(f"edge {cities[u], cities[v]} cost does not match the graph")
            return False, float('infinity')
        cost += weight
    return True, float(cost)


def write_route_to_out(route, cities, in_file, out_dir=None):
    if out_dir is None:
        out_dir = os.path.join(os.getcwd(), OUTPUT_FILE_DIRECTORY)
    if not os.path.exists(out_dir):
        os.makedirs(out_dir)
    file_name = os.path.splitext(os.path.basename(in_file))[0] + OUTPUT_FILE_EXTENSION
    out_file_path = os.path.join(out_dir, file_name)
    write_to_file(out_file_path, '\n'.join(format_route(route, cities)) + '\n')
    return out_file_path


def draw_route(G, cities, route, with_weight=True):
    """Draw the graph, with the route edges highlighted"""
    pos = nx.spring_layout(G, seed=0)  # positions for all nodes
    nx.draw(G, pos, with_labels=True, node_color='skyblue', node_size=2000, font_size=10)

    if route is not None:
        route_edges = [(cities[u], cities[v]) for u, _, v in route.all_edges()]
        nx.draw_networkx_edges(G, pos, edgelist=route_edges, edge_color='tab:red', width=3)

    if with_weight:
        # Draw edge labels
        edge_labels = nx.get_edge_attributes(G, 'weight')
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels)
    plt.show()
