from abc import ABC, abstractmethod
from typing import Dict, List


class LLMClient(ABC):
    @abstractmethod
    def generate(self, messages: List[Dict]) -> str:
        """
        Return the assistant text for one chat completion.

        Implementations raise a ReelgenError subclass on upstream failure.
        """
        pass
