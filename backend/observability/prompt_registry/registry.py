"""
Langfuse prompt registry for versioned prompt management.

Singleton registry that pushes the analysis prompt templates to Langfuse
and resolves labelled versions back into LangChain templates.

Dependencies: langfuse, backend.configs, backend.observability.prompt_registry
System role: Prompt version control and retrieval
"""

import logging

from langchain_core.prompts import ChatPromptTemplate
from langfuse import Langfuse

from backend.configs import get_settings
from backend.observability.prompt_registry.converter import convert_chat_template
from backend.observability.prompt_registry.models import ModelConfig

logger = logging.getLogger(__name__)


class PromptRegistry:
    """
    Singleton registry for Langfuse prompt management.

    Inactive unless tracing is enabled and both Langfuse keys are set;
    every method is then a no-op returning None.
    """

    _instance: "PromptRegistry | None" = None
    _client: Langfuse | None = None
    _enabled: bool = False

    def __new__(cls) -> "PromptRegistry":
        """Singleton pattern for registry instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize Langfuse client with configuration."""
        obs_settings = get_settings().observability

        if not obs_settings.enable_tracing:
            logger.info("Langfuse tracing disabled, prompt registry inactive")
            self._enabled = False
            return

        if not obs_settings.public_key or not obs_settings.secret_key:
            logger.warning("Langfuse keys not configured, prompt registry inactive")
            self._enabled = False
            return

        self._client = Langfuse(
            public_key=obs_settings.public_key,
            secret_key=obs_settings.secret_key,
            host=obs_settings.host,
        )
        self._enabled = True
        logger.info("Prompt registry initialized: host=%s", obs_settings.host)

    @property
    def is_enabled(self) -> bool:
        """Check if registry is active."""
        return self._enabled

    def register_prompt(
        self,
        name: str,
        template: ChatPromptTemplate,
        config: ModelConfig,
        labels: list[str] | None = None,
    ):
        """
        Create a prompt, or a new version of it, in Langfuse.

        Args:
            name: Unique prompt identifier
            template: LangChain chat template
            config: Model configuration to store with prompt
            labels: Optional labels (e.g., ["production"])

        Returns:
            Created Langfuse prompt, or None if disabled
        """
        if not self._enabled or self._client is None:
            logger.debug("Prompt registry disabled, skipping registration: name=%s", name)
            return None

        labels = labels or []
        prompt = self._client.create_prompt(
            name=name,
            type="chat",
            prompt=convert_chat_template(template),
            config=config.to_langfuse_config(),
            labels=labels,
        )
        logger.info(
            "Registered chat prompt: name=%s version=%s labels=%s",
            name, prompt.version, labels,
        )
        return prompt

    def get_langchain_prompt(
        self,
        name: str,
        label: str | None = None,
    ) -> ChatPromptTemplate | None:
        """
        Fetch a prompt from Langfuse as a ChatPromptTemplate.

        Args:
            name: Prompt identifier
            label: Optional label filter

        Returns:
            ChatPromptTemplate: LangChain template, or None if disabled/not found
        """
        if not self._enabled or self._client is None:
            return None

        kwargs: dict = {"name": name}
        if label:
            kwargs["label"] = label

        try:
            prompt = self._client.get_prompt(**kwargs)
        except Exception as e:
            logger.warning("Prompt fetch failed: name=%s error=%s", name, e)
            return None
        if prompt is None:
            return None

        template = ChatPromptTemplate.from_messages(prompt.get_langchain_prompt())
        template.metadata = {"langfuse_prompt": prompt}
        logger.debug("Fetched prompt: name=%s version=%s", name, prompt.version)
        return template
