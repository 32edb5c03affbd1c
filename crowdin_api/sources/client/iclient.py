from abc import ABC, abstractmethod
from typing import Any


class IClient(ABC):
    """Interface for API clients"""

    @abstractmethod
    def get_client(self) -> Any:
        """Return the underlying client object"""
        pass
