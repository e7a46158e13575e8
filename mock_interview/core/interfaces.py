from abc import ABC, abstractmethod
from typing import Dict, Any, List

class LanguageModel(ABC):
    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Send a prompt to the model and return its raw text reply.

        Raises UpstreamModelError when the provider call fails.
        """
        pass

class TranscriptStore(ABC):
    @abstractmethod
    async def append(self, record: Dict[str, Any]) -> None:
        """Durably append one finished interview transcript."""
        pass

    @abstractmethod
    def records(self) -> List[Dict[str, Any]]:
        """Return every stored transcript, oldest first."""
        pass
