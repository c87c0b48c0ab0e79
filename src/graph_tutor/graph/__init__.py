"""Graph store layer.

- Node models and natural keys
- A graph store protocol + Neo4j implementation
- The fixed Cypher scripts the tutor runs
"""

from .models import NODE_KEYS, Session, VocabError, Word
from .store import GraphStore

__all__ = ["NODE_KEYS", "Session", "VocabError", "Word", "GraphStore"]
