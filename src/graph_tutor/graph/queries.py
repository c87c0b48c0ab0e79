"""Fixed Cypher scripts.

Every caller-supplied value is bound as a parameter. Labels and relationship
types are literals here because Cypher cannot parameterize them.
"""

SCHEMA_STATEMENTS = [
    "CREATE CONSTRAINT word_text IF NOT EXISTS FOR (n:Word) REQUIRE n.text IS UNIQUE",
    "CREATE CONSTRAINT session_id IF NOT EXISTS FOR (n:Session) REQUIRE n.sessionId IS UNIQUE",
    "CREATE CONSTRAINT exercise_id IF NOT EXISTS FOR (n:Exercise) REQUIRE n.id IS UNIQUE",
    # Lets concurrent MERGEs on the same word converge on one counter node.
    "CREATE CONSTRAINT vocab_error_word IF NOT EXISTS FOR (n:VocabError) REQUIRE n.word IS UNIQUE",
]

LIST_WORDS = """
MATCH (w:Word)
RETURN
  w.text AS text,
  w.gender AS gender,
  w.pos AS pos,
  w.difficulty AS difficulty,
  w.frequency AS frequency
ORDER BY text
"""

# Both MATCHes run before any CREATE: a missing Session or Word yields zero
# rows and zero writes. The FOREACH runs its body once for a miss and not at
# all for a correct answer.
LOG_RESPONSE = """
MATCH (s:Session {sessionId: $sessionId})
MATCH (w:Word {text: $wordText})
CREATE (e:Exercise {id: randomUUID(), type: $exerciseType, prompt: $prompt})
CREATE (r:Response {answer: $userAnswer, timestamp: datetime(), correct: $correct})
CREATE (s)-[:GAVE_RESPONSE]->(r)
CREATE (e)-[:TARGETS]->(w)
FOREACH (_ IN CASE WHEN $correct THEN [] ELSE [1] END |
  MERGE (v:VocabError {word: w.text})
  ON CREATE SET v.count = 1
  ON MATCH SET v.count = coalesce(v.count, 0) + 1
  MERGE (s)-[:HAD_VOCAB_ERROR]->(v)
)
RETURN r.correct AS correct, w.text AS word, s.sessionId AS sessionId
"""

SESSION_VOCAB_ERRORS = """
MATCH (s:Session {sessionId: $sessionId})
OPTIONAL MATCH (s)-[:HAD_VOCAB_ERROR]->(v:VocabError)
WITH s, v ORDER BY v.word
RETURN s.sessionId AS sessionId, [x IN collect(v) | {word: x.word, count: x.count}] AS errors
"""

IMPORT_WORDS = """
UNWIND $rows AS row
MERGE (w:Word {text: row.text})
SET w.gender = row.gender,
    w.pos = row.pos,
    w.difficulty = row.difficulty,
    w.frequency = row.frequency
RETURN count(w) AS n
"""


def find_node(label: str, key: str) -> str:
    return f"MATCH (n:{label} {{{key}: $key}}) RETURN properties(n) AS node LIMIT 1"


def create_node(label: str) -> str:
    return f"CREATE (n:{label}) SET n = $props RETURN properties(n) AS node"
