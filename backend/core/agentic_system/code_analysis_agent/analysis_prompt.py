"""
Code analysis prompts.

One ChatPromptTemplate per analysis type. Templates take {code} and
{language}; the chat template additionally takes {file_name} and a
"history" placeholder with the conversation so far.
Supports Langfuse prompt registry integration for the structured prompts.

Dependencies: langchain_core.prompts, backend.observability.prompt_registry
System role: Prompt templates for code analysis
"""

import logging

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from backend.configs.ai_provider import AIProviderSettings
from backend.models.analysis import AnalysisType
from backend.observability.prompt_registry.models import ModelConfig
from backend.observability.prompt_registry.registry import PromptRegistry

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an expert software engineer who explains source code to developers.
Work only from the code you are given. Do not invent functions, files or behavior that the code does not show."""

DIAGRAM_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Convert the following code into a JSON object representing a flowchart for React Flow. Identify the logical steps, conditions, and loops.

- Each node must have a unique 'id', a 'type', and a 'data' object with a 'label'.
- Node types can be: 'start', 'end', 'process', 'condition', 'loop', 'function', 'input', 'output'.
- Each edge must have a unique 'id', a 'source' node id, and a 'target' node id.
- Label the edges leaving a 'condition' node (for example 'Yes' and 'No').
- Write node and edge labels in {language}.

Code:
```
{code}
```"""),
])

NATURAL_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Provide a detailed, human-friendly explanation of the following code in {language}. Break down the explanation into logical sections.

Code:
```
{code}
```"""),
])

PSEUDOCODE_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Rewrite the following code as detailed, step-by-step pseudocode in {language}.

Code:
```
{code}
```"""),
])

CHAT_SYSTEM_PROMPT = SYSTEM_PROMPT + """

The user is reading the file `{file_name}` and asks questions about it.
Answer in {language}. Be concise, quote the relevant lines when it helps,
and say so plainly when the question cannot be answered from this file.

File content:
```
{code}
```"""

CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", CHAT_SYSTEM_PROMPT),
    MessagesPlaceholder("history"),
])

STRUCTURED_PROMPTS: dict[AnalysisType, ChatPromptTemplate] = {
    AnalysisType.DIAGRAM: DIAGRAM_PROMPT,
    AnalysisType.NATURAL: NATURAL_PROMPT,
    AnalysisType.PSEUDOCODE: PSEUDOCODE_PROMPT,
}


def prompt_name(analysis_type: AnalysisType) -> str:
    """Registry name of an analysis prompt, e.g. 'code-analysis-diagram'."""
    return f"code-analysis-{analysis_type.value}"


def register_analysis_prompts(
    settings: AIProviderSettings,
    provider: str = "OpenAI",
    labels: list[str] | None = None,
) -> None:
    """
    Register the structured analysis prompts with Langfuse.

    Args:
        settings: Provider settings stored alongside each prompt
        provider: Vendor tag recorded in the prompt config
        labels: Optional labels (e.g., ["production", "staging"])
    """
    registry = PromptRegistry()

    if not registry.is_enabled:
        logger.debug("Prompt registry disabled, skipping registration")
        return

    model = settings.openai_model if provider == "OpenAI" else settings.gemini_model
    for analysis_type, template in STRUCTURED_PROMPTS.items():
        config = ModelConfig(
            provider=provider,
            model=model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            schema_name=analysis_type.value,
        )
        registry.register_prompt(
            name=prompt_name(analysis_type),
            template=template,
            config=config,
            labels=labels or ["development"],
        )
    logger.info("Registered %d analysis prompts", len(STRUCTURED_PROMPTS))


def get_analysis_prompt(
    analysis_type: AnalysisType,
    use_registry: bool = False,
    label: str | None = None,
) -> ChatPromptTemplate:
    """
    Get the prompt template for an analysis type.

    Args:
        analysis_type: Requested analysis
        use_registry: Whether to try the Langfuse registry first
        label: Optional label filter when using registry

    Returns:
        ChatPromptTemplate: Registered version if available, else the local template
    """
    if analysis_type is AnalysisType.CHAT:
        return CHAT_PROMPT

    if use_registry:
        registry = PromptRegistry()
        if registry.is_enabled:
            prompt = registry.get_langchain_prompt(prompt_name(analysis_type), label=label)
            if prompt is not None:
                logger.debug("Using prompt from registry: name=%s", prompt_name(analysis_type))
                return prompt
            logger.debug("Prompt not found in registry, using local template")

    return STRUCTURED_PROMPTS[analysis_type]
