"""
RAG query module.

Exports: AnswerComposer, build_messages
"""

from docrag.core.rag_query.answer_composer import AnswerComposer
from docrag.core.rag_query.context_prompt import CONTEXT_PREAMBLE, build_messages

__all__ = ["AnswerComposer", "build_messages", "CONTEXT_PREAMBLE"]
