"""
Grounding prompt for answer composition.

Dependencies: langchain_core.messages
System role: Message construction for the generative call
"""

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from docrag.boundary.vdb.vector_schemas import SimilarityResult

CONTEXT_PREAMBLE = "Here is some info you can use in your response:\n"


def build_context(results: list[SimilarityResult]) -> str:
    """Join result contents in ranking order under the context preamble."""
    return CONTEXT_PREAMBLE + "\n".join(result.content for result in results)


def build_messages(query: str, results: list[SimilarityResult]) -> list[BaseMessage]:
    """
    Build the message list sent to the chat model.

    A system context message is prepended only when there are results;
    otherwise the user query is sent alone.

    Args:
        query: User question
        results: Ranked similarity results

    Returns:
        list[BaseMessage]: [SystemMessage, HumanMessage] or [HumanMessage]
    """
    messages: list[BaseMessage] = []
    if results:
        messages.append(SystemMessage(content=build_context(results)))
    messages.append(HumanMessage(content=query))
    return messages
