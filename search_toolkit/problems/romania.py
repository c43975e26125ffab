# search_toolkit/problems/romania.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Mapping

from .graph import GraphProblem


# --- Data --------------------------------------------------------------------

# Road distances (bidirectional) from AIMA Fig. 3.1
_GRAPH: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Arad": 75, "Oradea": 71},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Arad": 118, "Lugoj": 111},
    "Lugoj": {"Timisoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Craiova": {"Drobeta": 120, "Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Sibiu": 80, "Craiova": 146, "Pitesti": 97},
    "Fagaras": {"Sibiu": 99, "Bucharest": 211},
    "Pitesti": {"Rimnicu Vilcea": 97, "Craiova": 138, "Bucharest": 101},
    "Bucharest": {"Fagaras": 211, "Pitesti": 101, "Giurgiu": 90, "Urziceni": 85},
    "Giurgiu": {"Bucharest": 90},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Urziceni": 98, "Eforie": 86},
    "Eforie": {"Hirsova": 86},
    "Vaslui": {"Urziceni": 142, "Iasi": 92},
    "Iasi": {"Vaslui": 92, "Neamt": 87},
    "Neamt": {"Iasi": 87},
}

# Straight-line distance to Bucharest (AIMA Fig. 3.16)
_SLD: Dict[str, int] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}


# --- Public container ---------------------------------------------------------

@dataclass(frozen=True)
class RomaniaMap:
    graph: Mapping[str, Mapping[str, int]]
    sld_to_bucharest: Mapping[str, int]


ROMANIA = RomaniaMap(graph=_GRAPH, sld_to_bucharest=_SLD)


# --- Problem definition -------------------------------------------------------

class RomaniaProblem(GraphProblem):
    """
    Standard AIMA Romania route-finding problem.
    States are city names (strings); actions are roads (city, next_city) and cost
    the road distance. The straight-line-distance heuristic is only known towards
    Bucharest, so for any other goal the heuristic is 0.
    """

    def __init__(self, start: str = "Arad", goal: str = "Bucharest", data: RomaniaMap = ROMANIA):
        if start not in data.graph or goal not in data.graph:
            raise ValueError(f"unknown city in route {start!r} -> {goal!r}")
        estimates = data.sld_to_bucharest if goal == "Bucharest" else None
        super().__init__(data.graph, start, [goal], estimates)
        self.goal = goal
        self.data = data


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> RomaniaProblem:
    """
    Factory for a ready-to-use RomaniaProblem.
    """
    return RomaniaProblem(start=start, goal=goal, data=ROMANIA)
