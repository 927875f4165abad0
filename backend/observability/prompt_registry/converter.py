"""
LangChain to Langfuse prompt converter.

Converts ChatPromptTemplate messages to Langfuse chat messages with
variable syntax transformation.

Dependencies: langchain_core.prompts
System role: Template format conversion for prompt registry
"""

import re
from typing import TypedDict

from langchain_core.prompts import ChatPromptTemplate
from langchain_core.prompts.chat import (
    AIMessagePromptTemplate,
    HumanMessagePromptTemplate,
    SystemMessagePromptTemplate,
)

_ROLES = (
    (SystemMessagePromptTemplate, "system"),
    (HumanMessagePromptTemplate, "user"),
    (AIMessagePromptTemplate, "assistant"),
)

# {var} but not {{var}}
_VARIABLE = re.compile(r"(?<!\{)\{([^{}]+)\}(?!\})")


class LangfuseMessage(TypedDict):
    """Langfuse chat message format."""

    role: str
    content: str


def convert_variables(content: str) -> str:
    """
    Convert LangChain {variable} placeholders to Langfuse {{variable}}.

    Args:
        content: Template string with LangChain variables

    Returns:
        str: Template string with Langfuse variables
    """
    return _VARIABLE.sub(r"{{\1}}", content)


def convert_chat_template(template: ChatPromptTemplate) -> list[LangfuseMessage]:
    """
    Convert a ChatPromptTemplate to Langfuse chat messages.

    Args:
        template: Template made of system/human/ai message templates

    Returns:
        list[LangfuseMessage]: Messages with Langfuse variable syntax

    Raises:
        ValueError: If the template holds a message kind Langfuse cannot store
            (for example a MessagesPlaceholder)
    """
    messages: list[LangfuseMessage] = []
    for message in template.messages:
        role = next((r for cls, r in _ROLES if isinstance(message, cls)), None)
        if role is None:
            raise ValueError(f"Unsupported message type: {type(message).__name__}")
        content = convert_variables(str(message.prompt.template))
        messages.append(LangfuseMessage(role=role, content=content))
    return messages
