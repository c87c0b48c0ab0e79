"""Graph Tutor: language-learning activity recorded in a Neo4j graph."""

__version__ = "0.1.0"
