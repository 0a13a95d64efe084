from abc import ABC, abstractmethod

DEFAULT_SYSTEM_PROMPT = (
    "You are an expert AI assistant specializing in interview preparation and career development."
)


class BasePrompt(ABC):
    """
    Prompt templates for one AI provider.

    Question prompts are formatted with the ``QuestionRequest`` fields, evaluation
    prompts with the answer, job and cultural guidance.
    """

    @abstractmethod
    def get_prompt_for_question_generation(self) -> str:
        pass

    @abstractmethod
    def get_prompt_for_answer_evaluation(self) -> str:
        pass

    def get_system_prompt(self, domain: str = "general") -> str:
        return DEFAULT_SYSTEM_PROMPT
