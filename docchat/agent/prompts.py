"""Prompt construction for grounded and ungrounded questions."""

CONTEXT_INSTRUCTION = (
    "Answer the question using only the information in the context below. "
    "If the context does not contain enough information to answer the question, "
    "say that you cannot answer it from the provided context."
)

CONTEXT_PROMPT_TEMPLATE = "{instruction}\n\nContext:\n{context}\n\nUser Question: {question}"


def build_prompt(message: str, context: str | None = None) -> str:
    """Build the text sent to the model.

    Args:
        message: The user's question.
        context: Text of the selected document, or None for no context.

    Returns:
        The raw message when there is no context, otherwise the message
        wrapped in the context-only instruction.
    """
    if context is None:
        return message
    return CONTEXT_PROMPT_TEMPLATE.format(
        instruction=CONTEXT_INSTRUCTION,
        context=context,
        question=message,
    )
