# storage/base.py
from abc import ABC, abstractmethod
from typing import Any
from .dto import StatResult


class Filesystem(ABC):
    """
    Abstract base class for a path-addressed filesystem.
    Defines the common interface that concrete backends
    (e.g., Google Drive) must implement.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def stat(self, path: str) -> StatResult:
        """
        Lists the entries of the folder at the given path.

        :param path: The slash-delimited path of the folder.
        :return: A StatResult with one DirectoryEntry per child.
        """
        pass

    @abstractmethod
    def read(self, path: str) -> Any:
        """
        Fetches the content of the file at the given path.

        :param path: The slash-delimited path of the file.
        :return: An un-buffered response the caller can stream from.
        """
        pass

    @abstractmethod
    def write(self, path: str, content: bytes | str) -> bytes | str:
        """
        Replaces the content of an existing file, or creates it.

        :param path: The slash-delimited path of the file.
        :param content: The content to store.
        :return: The content that was written.
        """
        pass
