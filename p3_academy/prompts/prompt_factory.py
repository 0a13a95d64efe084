from p3_academy.prompts.base_prompt import BasePrompt
from p3_academy.prompts.openai_prompt import OpenAIPrompt
from p3_academy.prompts.sealion_prompt import SeaLionPrompt


def get_prompt_by_provider(provider: str) -> BasePrompt:
    if provider == "openai":
        return OpenAIPrompt()
    elif provider == "sealion":
        return SeaLionPrompt()
    else:
        raise ValueError(f"Unsupported provider: {provider}")
