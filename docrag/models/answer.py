"""
Composed answer model.

The full result of one ask: the question, the assembled answer text and
the ranked chunks that grounded it.

Dependencies: pydantic, docrag.boundary.vdb
System role: Transcript payload
"""

from pydantic import BaseModel, Field

from docrag.boundary.vdb.vector_schemas import SimilarityResult


class ComposedAnswer(BaseModel):
    """Question, streamed answer and the similarity results used."""

    query: str = Field(description="User question as asked")
    answer: str = Field(description="Full answer assembled from streamed fragments")
    results: list[SimilarityResult] = Field(
        default_factory=list,
        description="Chunks supplied as grounding context, in ranking order",
    )

    @property
    def grounded(self) -> bool:
        """Whether any retrieved context was sent with the question."""
        return bool(self.results)
