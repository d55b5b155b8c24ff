"""
Core data models for ipnodes.

These dataclasses are the values passed between the placement
pipeline, the node store and the HTTP layer.
"""

from .point import Point, BOUND
from .node import Node

__all__ = ["Point", "Node", "BOUND"]
