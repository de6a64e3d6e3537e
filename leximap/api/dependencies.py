"""Route Dependencies — wiring of the lexeme pipeline for request handlers.

Invariants:
    - One LexemeAssembler per process, built in the lifespan, stored on app.state
    - Handlers obtain it only through get_assembler (overridable in tests)
"""

from fastapi import Request

from leximap.core.boundary_protocols import Lexicon, RelationSource
from leximap.services.lexeme_assembler import LexemeAssembler
from leximap.services.relation_fetcher import RelationFetcher
from leximap.services.sense_resolver import SenseResolver


def build_assembler(lexicon: Lexicon, relations: RelationSource) -> LexemeAssembler:
    return LexemeAssembler(SenseResolver(lexicon), RelationFetcher(relations))


def get_assembler(request: Request) -> LexemeAssembler:
    return request.app.state.assembler
