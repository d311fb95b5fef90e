from .prompt_builder import PersonaPromptBuilder  # noqa: F401
