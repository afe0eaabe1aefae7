"""
Base parser contract.
"""

from abc import ABC, abstractmethod


class BaseParser(ABC):
    """Holds raw file contents until a concrete parser decodes them."""

    def __init__(self, contents: str):
        self.contents = contents

    @abstractmethod
    def parse(self):
        """Decode the stored contents."""
        pass
